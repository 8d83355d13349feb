"""
Controls: the composite control, its edit control, leaf controls and the
declarative schema builder.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .object_control import ObjectControl
    from .edit_object_control import EditObjectControl
    from .fields import FieldDescriptor, FieldUpdate, apply_field_update
    from .views import LeafView, FieldRow, ObjectView
    from .control_registry import ControlMeta, CONTROL_IMPLEMENTATIONS, get_control_class
    from .schema import build_control, build_field

_EXPORTS = {
    "ObjectControl": ("pyqt_controls.controls.object_control", "ObjectControl"),
    "EditObjectControl": ("pyqt_controls.controls.edit_object_control", "EditObjectControl"),
    "StringControl": ("pyqt_controls.controls.leaf_controls", "StringControl"),
    "NumberControl": ("pyqt_controls.controls.leaf_controls", "NumberControl"),
    "BooleanControl": ("pyqt_controls.controls.leaf_controls", "BooleanControl"),
    "DurationControl": ("pyqt_controls.controls.leaf_controls", "DurationControl"),
    "SelectControl": ("pyqt_controls.controls.leaf_controls", "SelectControl"),
    "FieldDescriptor": ("pyqt_controls.controls.fields", "FieldDescriptor"),
    "FieldUpdate": ("pyqt_controls.controls.fields", "FieldUpdate"),
    "apply_field_update": ("pyqt_controls.controls.fields", "apply_field_update"),
    "LeafView": ("pyqt_controls.controls.views", "LeafView"),
    "FieldRow": ("pyqt_controls.controls.views", "FieldRow"),
    "ObjectView": ("pyqt_controls.controls.views", "ObjectView"),
    "ControlMeta": ("pyqt_controls.controls.control_registry", "ControlMeta"),
    "CONTROL_IMPLEMENTATIONS": ("pyqt_controls.controls.control_registry", "CONTROL_IMPLEMENTATIONS"),
    "get_control_class": ("pyqt_controls.controls.control_registry", "get_control_class"),
    "build_control": ("pyqt_controls.controls.schema", "build_control"),
    "build_field": ("pyqt_controls.controls.schema", "build_field"),
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
