"""Editable counterpart of ObjectControl."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple

from pyqt_controls.controls.fields import FieldDescriptor, field_change_handler, field_value
from pyqt_controls.controls.views import FieldRow, ObjectView
from pyqt_controls.protocols.control_protocols import EditControl


class EditObjectControl(EditControl):
    """
    Edit control for a composite value.

    Validation is conjunctive over every field, save recurses into every
    field, and the edit view recomputes each field's validity locally.
    """

    def __init__(
        self,
        optional: bool,
        fields: Tuple[FieldDescriptor, ...],
        edit_controls: Mapping[str, EditControl],
    ):
        self._optional = bool(optional)
        self._fields = tuple(fields)
        self._edit_controls = MappingProxyType(dict(edit_controls))

    @property
    def optional(self) -> bool:
        return self._optional

    @property
    def fields(self) -> Tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def edit_controls(self) -> Mapping[str, EditControl]:
        return self._edit_controls

    def validate(self, value: Any) -> bool:
        return all(
            self._edit_controls[f.field].validate(field_value(value, f.field))
            for f in self._fields
        )

    def save(self, value: Any) -> dict:
        return {
            f.field: self._edit_controls[f.field].save(field_value(value, f.field))
            for f in self._fields
        }

    def render(self, value: Any, on_change: Callable[[Any], None], is_valid: bool = True) -> ObjectView:
        # is_valid is the parent's aggregate; each row recomputes its own so it never goes stale.
        if not isinstance(value, Mapping):
            value = {f.field: f.control.edit(f.control.default()) for f in self._fields}

        rows = []
        for f in self._fields:
            control = self._edit_controls[f.field]
            child_value = value.get(f.field)
            child_on_change = field_change_handler(value, f.field, on_change)
            child_view = control.render(child_value, child_on_change, control.validate(child_value))
            rows.append(FieldRow(f.field, f.title, child_view))
        return ObjectView(tuple(rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditObjectControl):
            return NotImplemented
        return (
            self._optional == other._optional
            and self._fields == other._fields
            and dict(self._edit_controls) == dict(other._edit_controls)
        )

    def __hash__(self) -> int:
        return hash((self._optional, self._fields))

    def __repr__(self) -> str:
        names = ", ".join(f.field for f in self._fields)
        return f"EditObjectControl([{names}], optional={self._optional})"
