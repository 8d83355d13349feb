"""
Declarative schema builder.

Turns a plain mapping description into a control tree, dispatching on the
"type" key through the control registry:

    build_control({
        "type": "object",
        "fields": [
            {"field": "name", "title": "Name", "control": {"type": "string"}},
            {"field": "timeout", "control": {"type": "duration", "optional": True}},
            {"field": "volume", "control": {"type": "number", "minimum": 0, "maximum": 100}},
        ],
    })

A field without a title is labeled from its identifier ("song_limit" -> "Song Limit").
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pyqt_controls.controls.control_registry import get_control_class
from pyqt_controls.controls.fields import FieldDescriptor
from pyqt_controls.exceptions import SchemaError
from pyqt_controls.protocols.control_protocols import Control

# Built-in controls register themselves on import.
from pyqt_controls.controls import leaf_controls, object_control  # noqa: F401

logger = logging.getLogger(__name__)


def format_field_title(name: str) -> str:
    """Convert snake_case to Title Case: 'field_name' -> 'Field Name'"""
    return name.replace('_', ' ').title()


def build_control(description: Any) -> Control:
    """
    Build a control tree from a declarative description.

    Already built controls pass through unchanged, so descriptions may embed
    hand-constructed controls.

    Raises:
        SchemaError: If the description is malformed or names an unknown type
    """
    if isinstance(description, Control):
        return description
    if not isinstance(description, Mapping):
        raise SchemaError(f"Control description must be a mapping, got {type(description).__name__}")

    control_type = description.get("type")
    if not isinstance(control_type, str):
        raise SchemaError(f"Control description is missing a 'type': {dict(description)!r}")

    control_class = get_control_class(control_type)
    control = control_class.from_description(description)
    logger.debug(f"Built {control_type} control: {control!r}")
    return control


def build_field(description: Any) -> FieldDescriptor:
    """Build one FieldDescriptor from {"field", "title"?, "control"}."""
    if isinstance(description, FieldDescriptor):
        return description
    if not isinstance(description, Mapping):
        raise SchemaError(f"Field description must be a mapping, got {type(description).__name__}")

    name = description.get("field")
    if not isinstance(name, str) or not name:
        raise SchemaError(f"Field description is missing a 'field' identifier: {dict(description)!r}")
    if "control" not in description:
        raise SchemaError(f"Field '{name}' is missing a 'control' description")

    title = description.get("title") or format_field_title(name)
    return FieldDescriptor(name, title, build_control(description["control"]))
