"""
Field descriptors and field update messages for composite controls.

A composite value is a plain dict keyed by field identifier. Updates never
mutate it: a FieldUpdate is merged into a shallow copy, and the copy is
forwarded one level up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Tuple

from pyqt_controls.exceptions import SchemaError

if TYPE_CHECKING:
    from pyqt_controls.protocols.control_protocols import Control


@dataclass(frozen=True)
class FieldDescriptor:
    """One named field of a composite control."""
    field: str        # Identifier, unique within the composite
    title: str        # Display label
    control: Control  # Child control, leaf or composite


@dataclass(frozen=True)
class FieldUpdate:
    """Immutable patch: replace one field of a composite value."""
    field: str
    value: Any


def field_value(values: Any, field: str) -> Any:
    """Read one field from a composite value; absent fields and non-mappings read as None."""
    if isinstance(values, Mapping):
        return values.get(field)
    return None


def apply_field_update(values: Any, update: FieldUpdate) -> dict:
    """Return a shallow copy of ``values`` with exactly ``update.field`` replaced."""
    new_values = dict(values) if isinstance(values, Mapping) else {}
    new_values[update.field] = update.value
    return new_values


def field_change_handler(
    values: Mapping[str, Any],
    field: str,
    on_change: Callable[[Any], None],
) -> Callable[[Any], None]:
    """Build the on_change a child receives: wrap its value in a FieldUpdate and bubble up."""
    def handler(update: Any) -> None:
        on_change(apply_field_update(values, FieldUpdate(field, update)))
    return handler


def normalize_fields(fields: Iterable[Any]) -> Tuple[FieldDescriptor, ...]:
    """
    Normalize a field list into a tuple of FieldDescriptor.

    Accepts FieldDescriptor instances or (field, title, control) triples.

    Raises:
        SchemaError: On malformed entries or duplicate identifiers
    """
    from pyqt_controls.protocols.control_protocols import Control

    normalized = []
    seen = set()
    for entry in fields:
        if not isinstance(entry, FieldDescriptor):
            try:
                entry = FieldDescriptor(*entry)
            except TypeError as e:
                raise SchemaError(f"Malformed field entry {entry!r}: expected (field, title, control)") from e
        if not isinstance(entry.field, str) or not entry.field:
            raise SchemaError(f"Field identifier must be a non-empty string, got {entry.field!r}")
        if not isinstance(entry.control, Control):
            raise SchemaError(f"Field '{entry.field}' control must be a Control, got {type(entry.control).__name__}")
        if entry.field in seen:
            raise SchemaError(f"Duplicate field identifier '{entry.field}'")
        seen.add(entry.field)
        normalized.append(entry)
    return tuple(normalized)
