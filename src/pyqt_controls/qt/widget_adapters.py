"""
Widget adapters that wrap Qt widgets to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentIndex()

Every adapter registers itself in the widget registry under its _widget_id,
which is the id leaf controls put in their LeafView.
"""

from typing import Any, Callable, Sequence
from abc import ABCMeta

from PyQt6.QtWidgets import QLineEdit, QSpinBox, QComboBox, QCheckBox
from PyQt6.QtCore import QObject

from pyqt_controls.protocols.widget_protocols import (
    ValueGettable, ValueSettable, RangeConfigurable, OptionsSelectable, ChangeSignalEmitter,
    NoneCapable,
)
from pyqt_controls.qt.widget_registry import register_widget

# Order matters: Qt's metaclass first, ABCMeta supplies abstract method checks
_QtMetaclass = type(QObject)

_INT32_MIN = -2147483648
_INT32_MAX = 2147483647


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


@register_widget
class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    Returns the text verbatim: edit values such as partially typed numbers
    must survive a round trip through the widget unchanged.
    """

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.textChanged.connect(lambda: callback(self.get_value()))


@register_widget
class SpinBoxAdapter(QSpinBox, ValueGettable, ValueSettable, RangeConfigurable,
                     NoneCapable, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QSpinBox.

    Handles None values using special value text mechanism: when None is
    allowed, one step below the configured minimum is reserved and shows
    blank special text. Values outside the 32-bit range Qt accepts are clamped.
    """

    _widget_id = "spin_box"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._allow_none = True
        self._apply_range(_INT32_MIN + 1, _INT32_MAX)

    def get_value(self) -> Any:
        if self._allow_none and self.value() == self.minimum():
            return None
        return self.value()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setValue(self.minimum())
            return
        lowest = self.minimum() + 1 if self._allow_none else self.minimum()
        self.setValue(max(lowest, min(self.maximum(), int(value))))

    def set_allow_none(self, allow_none: bool) -> None:
        minimum = self.minimum() + 1 if self._allow_none else self.minimum()
        self._allow_none = bool(allow_none)
        self._apply_range(minimum, self.maximum())

    def configure_range(self, minimum: float, maximum: float) -> None:
        self._apply_range(int(minimum), int(maximum))

    def _apply_range(self, minimum: int, maximum: int) -> None:
        minimum = max(_INT32_MIN + 1, min(minimum, _INT32_MAX))
        maximum = max(minimum, min(maximum, _INT32_MAX))
        if self._allow_none:
            # One step below minimum is reserved for the None special value
            self.setRange(minimum - 1, maximum)
            self.setSpecialValueText(" ")
        else:
            self.setRange(minimum, maximum)
            self.setSpecialValueText("")

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.valueChanged.connect(lambda: callback(self.get_value()))


@register_widget
class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, OptionsSelectable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores actual values in itemData, not just display text.
    """

    _widget_id = "combo_box"

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_options(self, options: Sequence[Any], allow_empty: bool = False) -> None:
        self.clear()
        if allow_empty:
            self.addItem("", None)
        for option in options:
            self.addItem(str(option), option)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.currentIndexChanged.connect(lambda: callback(self.get_value()))


@register_widget
class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    _widget_id = "check_box"

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.stateChanged.connect(lambda: callback(self.get_value()))
