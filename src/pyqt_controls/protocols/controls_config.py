"""Base configuration for control rendering.

Provides hooks for applications to customize how painted controls look.
"""

from dataclasses import dataclass, field
from typing import Optional

from pyqt_controls.qt.layout_constants import COMPACT_LAYOUT, ControlsLayoutConfig


@dataclass
class ControlsConfig:
    """Base configuration for control painting.

    Applications can subclass this to provide custom configuration.

    Attributes:
        invalid_stylesheet: Stylesheet applied to leaf widgets whose value does not validate
        title_suffix: Appended to every field title in painted rows
        layout: Spacing and margins for painted forms
        debug_render: Log every render and refresh at DEBUG level
    """

    invalid_stylesheet: str = "border: 1px solid #d9534f; background-color: #fbeaea;"
    title_suffix: str = ":"
    layout: ControlsLayoutConfig = field(default_factory=lambda: COMPACT_LAYOUT)
    debug_render: bool = False


# Global config instance (set by application)
_controls_config: Optional[ControlsConfig] = None


def set_controls_config(config: Optional[ControlsConfig]) -> None:
    """Set the global controls configuration. None restores the defaults."""
    global _controls_config
    _controls_config = config


def get_controls_config() -> ControlsConfig:
    """Get the current controls configuration, or the defaults if unset."""
    if _controls_config is None:
        return ControlsConfig()
    return _controls_config
