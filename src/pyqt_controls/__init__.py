"""
pyqt-controls: schema-driven, recursively composable controls for PyQt6.

Describes structured data as a tree of controls. Every control can produce a
default value, construct typed values from raw input, serialize them back,
derive an editable counterpart, validate and save edited values, and render
read and edit views.

Architecture:
- Protocols: Control / EditControl ABCs, widget ABCs, configuration
- Controls: ObjectControl (composite), leaf controls, declarative schema builder
- Qt: ViewPainter paints view descriptions, ControlForm hosts an edit session

Key Features:
- Composite controls delegate every operation to their children field by field
- Values change by replacement: each edit produces a fresh composite value
- Validity is a boolean, aggregated conjunctively at every composite level
- Metaclass auto-registration of control types
"""

from __future__ import annotations

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "Control": ("pyqt_controls.protocols.control_protocols", "Control"),
    "EditControl": ("pyqt_controls.protocols.control_protocols", "EditControl"),
    "ObjectControl": ("pyqt_controls.controls.object_control", "ObjectControl"),
    "EditObjectControl": ("pyqt_controls.controls.edit_object_control", "EditObjectControl"),
    "StringControl": ("pyqt_controls.controls.leaf_controls", "StringControl"),
    "NumberControl": ("pyqt_controls.controls.leaf_controls", "NumberControl"),
    "BooleanControl": ("pyqt_controls.controls.leaf_controls", "BooleanControl"),
    "DurationControl": ("pyqt_controls.controls.leaf_controls", "DurationControl"),
    "SelectControl": ("pyqt_controls.controls.leaf_controls", "SelectControl"),
    "FieldDescriptor": ("pyqt_controls.controls.fields", "FieldDescriptor"),
    "FieldUpdate": ("pyqt_controls.controls.fields", "FieldUpdate"),
    "build_control": ("pyqt_controls.controls.schema", "build_control"),
    "SchemaError": ("pyqt_controls.exceptions", "SchemaError"),
    "InvalidValueError": ("pyqt_controls.exceptions", "InvalidValueError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__"] + list(_EXPORTS.keys())
