"""
Control ABC contracts for schema-driven editing.

Defines the two capability sets every control participates in:

- Control: default / construct / serialize / render / edit_control / edit / is_singular
- EditControl: validate / save / render

Composite and leaf controls implement the same contracts, which is what lets a
composite treat every child identically regardless of nesting depth.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud on malformed schemas, never on values
- Values change by replacement, never in place
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping

from pyqt_controls.controls.control_registry import ControlMeta

OnChange = Callable[[Any], None]


class EditControl(ABC):
    """
    ABC for the editing-session counterpart of a Control.

    Edit controls are derived on demand from a Control and are immutable.
    Only the values they operate on change.
    """

    optional: bool = False

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """
        Check whether an edited value may be saved.

        Pure predicate with no side effects. A value of None means the field
        is absent; whether that is acceptable depends on ``optional``.
        """
        pass

    @abstractmethod
    def save(self, value: Any) -> Any:
        """
        Finalize an edited value into its canonical typed form.

        Callers gate on validate(); behavior on invalid input is unspecified.
        """
        pass

    @abstractmethod
    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> Any:
        """
        Describe the edit view for a value.

        Args:
            value: Current edited value
            on_change: Called with the replacement value on every edit
            is_valid: Validity of ``value`` as computed by the caller
        """
        pass


class Control(ABC, metaclass=ControlMeta):
    """
    ABC for a schema node describing a value's shape and behavior.

    Concrete subclasses carrying a ``_control_id`` auto-register with the
    control registry so that declarative schemas can refer to them by id.
    """

    optional: bool = False

    @abstractmethod
    def default(self) -> Any:
        """Produce the default typed value."""
        pass

    @abstractmethod
    def construct(self, value: Any) -> Any:
        """
        Construct a typed value from raw input.

        Raw input may be None or malformed; it is normalized to the control's
        default rather than rejected.
        """
        pass

    @abstractmethod
    def serialize(self, value: Any) -> Any:
        """Serialize a typed value back to its raw form."""
        pass

    @abstractmethod
    def render(self, value: Any, on_change: OnChange) -> Any:
        """Describe the read view for a typed value."""
        pass

    @abstractmethod
    def edit_control(self) -> EditControl:
        """Derive the editable counterpart of this control."""
        pass

    @abstractmethod
    def edit(self, value: Any) -> Any:
        """Convert a typed value into the shape an edit session starts from."""
        pass

    @abstractmethod
    def is_singular(self) -> bool:
        """Whether this control represents a single scalar rather than a composite."""
        pass

    @classmethod
    def from_description(cls, description: Mapping[str, Any]) -> "Control":
        """Build this control from a declarative description mapping."""
        return cls(optional=bool(description.get("optional", False)))
