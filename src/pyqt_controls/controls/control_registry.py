"""
Control registry with metaclass auto-registration.

Controls auto-register when their classes are defined, so a declarative
schema can name a control type by id without a hand-maintained lookup table.

Design:
- ControlMeta metaclass handles auto-registration
- CONTROL_IMPLEMENTATIONS: Global registry of all control types
- Abstract classes and classes without _control_id are skipped
"""

from abc import ABCMeta
from typing import Dict, Type
import logging

from pyqt_controls.exceptions import SchemaError

logger = logging.getLogger(__name__)

# Maps control_id -> control class
CONTROL_IMPLEMENTATIONS: Dict[str, Type] = {}


class ControlMeta(ABCMeta):
    """
    Metaclass for automatic control registration.

    1. Only registers concrete implementations (no abstract methods)
    2. Requires _control_id attribute for identification
    3. Auto-populates CONTROL_IMPLEMENTATIONS registry

    Example:
        @dataclass(frozen=True)
        class StringControl(Control):
            _control_id = "string"
            ...

    The control auto-registers in CONTROL_IMPLEMENTATIONS["string"] when
    the class is defined.
    """

    def __new__(mcs, name, bases, attrs):
        new_class = super().__new__(mcs, name, bases, attrs)

        if getattr(new_class, '__abstractmethods__', None):
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{set(new_class.__abstractmethods__)}"
            )
            return new_class

        control_id = attrs.get('_control_id')
        if control_id is None:
            logger.debug(f"Skipping registration for {name} - no _control_id attribute")
            return new_class

        if control_id in CONTROL_IMPLEMENTATIONS:
            existing = CONTROL_IMPLEMENTATIONS[control_id]
            logger.warning(
                f"Control ID '{control_id}' already registered to {existing.__name__}. "
                f"Overwriting with {name}."
            )

        CONTROL_IMPLEMENTATIONS[control_id] = new_class
        logger.debug(f"Auto-registered {name} as '{control_id}'")
        return new_class


def get_control_class(control_id: str) -> Type:
    """
    Get control class by ID.

    Raises:
        SchemaError: If control_id not registered
    """
    if control_id not in CONTROL_IMPLEMENTATIONS:
        raise SchemaError(
            f"No control registered with ID '{control_id}'. "
            f"Available controls: {sorted(CONTROL_IMPLEMENTATIONS.keys())}"
        )
    return CONTROL_IMPLEMENTATIONS[control_id]


def list_control_ids() -> list[str]:
    """Return the ids of every registered control, sorted."""
    return sorted(CONTROL_IMPLEMENTATIONS.keys())
