"""
Composite control: a value made of named, independently typed sub-values.

Every operation delegates to the child controls field by field and recombines
the results into a fresh dict keyed by exactly the field identifiers. Children
may be leaves or other composites; the recursion needs nothing beyond the
Control contract.

Example:
    person = ObjectControl([
        ("name", "Name", StringControl()),
        ("age", "Age", NumberControl(optional=True)),
    ])
    person.default()                  # {"name": "", "age": None}
    person.construct({"name": "Ada"}) # {"name": "Ada", "age": None}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Tuple

from pyqt_controls.controls.edit_object_control import EditObjectControl
from pyqt_controls.controls.fields import (
    FieldDescriptor,
    field_change_handler,
    field_value,
    normalize_fields,
)
from pyqt_controls.controls.views import FieldRow, ObjectView
from pyqt_controls.exceptions import SchemaError
from pyqt_controls.protocols.control_protocols import Control

logger = logging.getLogger(__name__)


class ObjectControl(Control):
    """
    Control for a composite value with an ordered field list.

    Performs no validation and raises nothing on values: malformed or partial
    raw input is normalized by each child. Only a malformed field list raises,
    at construction time.
    """

    _control_id = "object"

    def __init__(self, fields: Iterable[Any], optional: bool = False):
        self._fields: Tuple[FieldDescriptor, ...] = normalize_fields(fields)
        self._optional = bool(optional)

    @property
    def fields(self) -> Tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def optional(self) -> bool:
        return self._optional

    def default(self) -> dict:
        return {f.field: f.control.default() for f in self._fields}

    def construct(self, value: Any) -> dict:
        if value is not None and not isinstance(value, Mapping):
            logger.debug(f"Constructing {self!r} from non-mapping {type(value).__name__}; using field defaults")
        return {f.field: f.control.construct(field_value(value, f.field)) for f in self._fields}

    def serialize(self, value: Any) -> dict:
        return {f.field: f.control.serialize(field_value(value, f.field)) for f in self._fields}

    def render(self, value: Any, on_change: Callable[[Any], None]) -> ObjectView:
        if not isinstance(value, Mapping):
            value = self.default()

        rows = []
        for f in self._fields:
            child_on_change = field_change_handler(value, f.field, on_change)
            rows.append(FieldRow(f.field, f.title, f.control.render(value.get(f.field), child_on_change)))
        return ObjectView(tuple(rows))

    def edit_control(self) -> EditObjectControl:
        edit_controls = {f.field: f.control.edit_control() for f in self._fields}
        return EditObjectControl(self._optional, self._fields, edit_controls)

    def edit(self, value: Any) -> dict:
        return {f.field: f.control.edit(field_value(value, f.field)) for f in self._fields}

    def is_singular(self) -> bool:
        return False

    @classmethod
    def from_description(cls, description: Mapping[str, Any]) -> ObjectControl:
        """Build from {"type": "object", "fields": [{"field", "title"?, "control"}, ...]}."""
        from pyqt_controls.controls.schema import build_field

        field_descriptions = description.get("fields")
        if not isinstance(field_descriptions, (list, tuple)):
            raise SchemaError(f"Object control requires a 'fields' list, got {field_descriptions!r}")
        return cls(
            [build_field(entry) for entry in field_descriptions],
            optional=bool(description.get("optional", False)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectControl):
            return NotImplemented
        return self._optional == other._optional and self._fields == other._fields

    def __hash__(self) -> int:
        return hash((self._optional, self._fields))

    def __repr__(self) -> str:
        names = ", ".join(f.field for f in self._fields)
        return f"ObjectControl([{names}], optional={self._optional})"
