"""
View descriptions returned by render().

Renders produce an immutable tree of rows and leaves; the Qt painter (or any
other toolkit) turns it into widgets. Callbacks are excluded from equality so
two renders of the same value compare equal.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union


@dataclass(frozen=True)
class LeafView:
    """A single input widget bound to one value."""
    widget_id: str                                            # Widget registry id, e.g. "line_edit"
    value: Any
    on_change: Callable[[Any], None] = field(compare=False, repr=False)
    is_valid: Optional[bool] = None                           # None in read views
    optional: bool = False
    options: Tuple[Any, ...] = ()                             # Choices for selection widgets
    value_range: Optional[Tuple[Optional[int], Optional[int]]] = None


@dataclass(frozen=True)
class FieldRow:
    """A labeled row pairing a field's title with its child view."""
    field: str
    title: str
    view: "View"


@dataclass(frozen=True)
class ObjectView:
    """Ordered rows of a composite control."""
    rows: Tuple[FieldRow, ...]

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(row.field for row in self.rows)

    def row(self, field_name: str) -> FieldRow:
        for row in self.rows:
            if row.field == field_name:
                return row
        raise KeyError(f"No row for field '{field_name}'. Available: {list(self.fields)}")


View = Union[LeafView, ObjectView]
