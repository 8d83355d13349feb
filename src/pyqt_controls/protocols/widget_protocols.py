"""
Widget ABC contracts for painting view descriptions.

The painter talks to every input widget through these ABCs instead of Qt's
inconsistent per-class APIs (text() vs value() vs currentData()).
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    All input widgets must implement this so the painter can compare the
    widget's state against an incoming view.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets that support numeric range configuration.

    Typically implemented by numeric input widgets (spinboxes, sliders).
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        """
        Configure the valid range for numeric input.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
        """
        pass


class OptionsSelectable(ABC):
    """
    ABC for widgets that select one value out of a fixed list.

    Typically implemented by dropdowns and radio button groups.
    """

    @abstractmethod
    def set_options(self, options: Sequence[Any], allow_empty: bool = False) -> None:
        """
        Populate the widget with options.

        Args:
            options: Values to choose from; displayed via str()
            allow_empty: Add an empty entry that selects None
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Provides explicit contract for signal connection, eliminating duck typing
    of signal names (textChanged vs valueChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        The callback will be invoked whenever the widget's value changes,
        receiving the new value as its argument.
        """
        pass


class NoneCapable(ABC):
    """
    ABC for widgets that can hold an explicit empty (None) value.

    Required fields turn this off so the widget can never produce None.
    """

    @abstractmethod
    def set_allow_none(self, allow_none: bool) -> None:
        """
        Args:
            allow_none: Whether the widget may be put into its None state
        """
        pass
