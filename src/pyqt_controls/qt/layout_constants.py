"""
Layout constants for painted controls.

Centralizes spacing and margin configuration so nested composites look
uniform at every depth.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ControlsLayoutConfig:
    """Configuration for painted control spacing and margins."""

    # Outer form layout
    main_layout_spacing: int = 4
    main_layout_margins: tuple = (4, 4, 4, 4)

    # Between field rows of one composite
    content_layout_spacing: int = 1
    content_layout_margins: tuple = (1, 1, 1, 1)

    # Nested composites are wrapped in a group box
    groupbox_spacing: int = 2
    groupbox_margins: tuple = (5, 5, 5, 5)


COMPACT_LAYOUT = ControlsLayoutConfig()

SPACIOUS_LAYOUT = ControlsLayoutConfig(
    main_layout_spacing=6,
    main_layout_margins=(8, 8, 8, 8),
    content_layout_spacing=4,
    content_layout_margins=(4, 4, 4, 4),
    groupbox_spacing=4,
    groupbox_margins=(8, 8, 8, 8),
)
