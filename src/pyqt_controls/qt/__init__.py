"""
PyQt6 painting layer.

Paints view descriptions into widgets and hosts edit sessions. Imported
lazily so the control core never requires a QApplication.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .view_painter import ViewPainter, CallbackSlot
    from .control_form import ControlForm
    from .layout_constants import ControlsLayoutConfig, COMPACT_LAYOUT, SPACIOUS_LAYOUT
    from .widget_registry import WIDGET_IMPLEMENTATIONS, get_widget_class, register_widget

_EXPORTS = {
    "ViewPainter": ("pyqt_controls.qt.view_painter", "ViewPainter"),
    "CallbackSlot": ("pyqt_controls.qt.view_painter", "CallbackSlot"),
    "ControlForm": ("pyqt_controls.qt.control_form", "ControlForm"),
    "ControlsLayoutConfig": ("pyqt_controls.qt.layout_constants", "ControlsLayoutConfig"),
    "COMPACT_LAYOUT": ("pyqt_controls.qt.layout_constants", "COMPACT_LAYOUT"),
    "SPACIOUS_LAYOUT": ("pyqt_controls.qt.layout_constants", "SPACIOUS_LAYOUT"),
    "WIDGET_IMPLEMENTATIONS": ("pyqt_controls.qt.widget_registry", "WIDGET_IMPLEMENTATIONS"),
    "get_widget_class": ("pyqt_controls.qt.widget_registry", "get_widget_class"),
    "register_widget": ("pyqt_controls.qt.widget_registry", "register_widget"),
    "LineEditAdapter": ("pyqt_controls.qt.widget_adapters", "LineEditAdapter"),
    "SpinBoxAdapter": ("pyqt_controls.qt.widget_adapters", "SpinBoxAdapter"),
    "ComboBoxAdapter": ("pyqt_controls.qt.widget_adapters", "ComboBoxAdapter"),
    "CheckBoxAdapter": ("pyqt_controls.qt.widget_adapters", "CheckBoxAdapter"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
