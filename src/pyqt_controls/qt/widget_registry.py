"""
Widget registry for painting leaf views.

Maps the widget_id a LeafView carries (e.g. "line_edit") to the adapter class
that paints it, and tracks which ABCs each adapter implements.
"""

from typing import Dict, Type, Set
import logging

from pyqt_controls.protocols.widget_protocols import (
    ValueGettable, ValueSettable, RangeConfigurable, OptionsSelectable, ChangeSignalEmitter,
    NoneCapable,
)

logger = logging.getLogger(__name__)

# Maps widget_id -> widget class
WIDGET_IMPLEMENTATIONS: Dict[str, Type] = {}

# Maps widget class -> set of ABC classes
WIDGET_CAPABILITIES: Dict[Type, Set[Type]] = {}

_ABC_TYPES = (
    ValueGettable, ValueSettable, RangeConfigurable, OptionsSelectable, ChangeSignalEmitter, NoneCapable
)


def register_widget(widget_class: Type) -> Type:
    """
    Register a widget class under its _widget_id.

    Painted leaves need at least ValueGettable, ValueSettable and
    ChangeSignalEmitter; anything less is rejected.

    Raises:
        TypeError: If the class has no _widget_id or lacks a required ABC
    """
    widget_id = getattr(widget_class, '_widget_id', None)
    if widget_id is None:
        raise TypeError(f"{widget_class.__name__} has no _widget_id attribute")

    capabilities = {abc_type for abc_type in _ABC_TYPES if issubclass(widget_class, abc_type)}
    missing = {ValueGettable, ValueSettable, ChangeSignalEmitter} - capabilities
    if missing:
        raise TypeError(
            f"{widget_class.__name__} cannot paint leaf views; missing {[c.__name__ for c in missing]}"
        )

    if widget_id in WIDGET_IMPLEMENTATIONS:
        existing = WIDGET_IMPLEMENTATIONS[widget_id]
        logger.warning(
            f"Widget ID '{widget_id}' already registered to {existing.__name__}. "
            f"Overwriting with {widget_class.__name__}."
        )

    WIDGET_IMPLEMENTATIONS[widget_id] = widget_class
    WIDGET_CAPABILITIES[widget_class] = capabilities
    logger.debug(
        f"Registered {widget_class.__name__} as '{widget_id}' with capabilities: "
        f"{sorted(c.__name__ for c in capabilities)}"
    )
    return widget_class


def get_widget_class(widget_id: str) -> Type:
    """
    Get widget class by ID.

    Raises:
        KeyError: If widget_id not registered
    """
    if widget_id not in WIDGET_IMPLEMENTATIONS:
        raise KeyError(
            f"No widget registered with ID '{widget_id}'. "
            f"Available widgets: {list(WIDGET_IMPLEMENTATIONS.keys())}"
        )
    return WIDGET_IMPLEMENTATIONS[widget_id]


def get_widget_capabilities(widget_class: Type) -> Set[Type]:
    """Get the ABCs that a widget class implements."""
    return WIDGET_CAPABILITIES.get(widget_class, set())
