"""
Control and widget protocol definitions.

ABC-based contracts that eliminate duck typing in favor of explicit,
fail-loud inheritance-based architecture.
"""

from .control_protocols import Control, EditControl
from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    RangeConfigurable,
    OptionsSelectable,
    ChangeSignalEmitter,
    NoneCapable,
)
from .controls_config import ControlsConfig, set_controls_config, get_controls_config

__all__ = [
    "Control",
    "EditControl",
    "ValueGettable",
    "ValueSettable",
    "RangeConfigurable",
    "OptionsSelectable",
    "ChangeSignalEmitter",
    "NoneCapable",
    "ControlsConfig",
    "set_controls_config",
    "get_controls_config",
]
