"""
Qt host for one edit session over a control.

Owns the current edited value, re-renders the edit control on every change,
and exposes the session to the application through Qt signals. The control
tree itself never blocks a save; this host does, since it is the one deciding
what to commit.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_controls.controls.views import ObjectView
from pyqt_controls.exceptions import InvalidValueError
from pyqt_controls.protocols.control_protocols import Control
from pyqt_controls.protocols.controls_config import ControlsConfig, get_controls_config
from pyqt_controls.qt.view_painter import ViewPainter

logger = logging.getLogger(__name__)


class ControlForm(QWidget):
    """
    Editable form for a control.

    Signals:
        value_changed(object): Emitted with the new edited value after every change
        validity_changed(bool): Emitted when the edited value flips between valid and invalid

    Usage:
        form = ControlForm(settings_control, settings_control.construct(raw))
        form.validity_changed.connect(save_button.setEnabled)
        save_button.clicked.connect(lambda: store(settings_control.serialize(form.save())))
    """

    value_changed = pyqtSignal(object)
    validity_changed = pyqtSignal(bool)

    def __init__(
        self,
        control: Control,
        value: Any = None,
        parent: Optional[QWidget] = None,
        config: Optional[ControlsConfig] = None,
    ):
        """
        Args:
            control: Control describing the edited value
            value: Typed value to start from; None starts from control.default()
            parent: Parent widget
            config: Painting configuration; the global config if omitted
        """
        super().__init__(parent)
        self._config = config or get_controls_config()
        self._control = control
        self._edit_control = control.edit_control()
        self._value = control.edit(control.default() if value is None else value)
        self._valid = self._edit_control.validate(self._value)

        self._painter = ViewPainter(self._config)
        layout = QVBoxLayout(self)
        layout.setSpacing(self._config.layout.main_layout_spacing)
        layout.setContentsMargins(*self._config.layout.main_layout_margins)
        layout.addWidget(self._painter.paint(self._render(), self))

    @property
    def control(self) -> Control:
        return self._control

    @property
    def painter(self) -> ViewPainter:
        return self._painter

    def value(self) -> Any:
        """Current edited (not yet saved) value."""
        return self._value

    def is_valid(self) -> bool:
        return self._valid

    def set_value(self, value: Any) -> None:
        """Replace the session with a new typed value, e.g. after an external reload."""
        self._apply(self._control.edit(value))

    def save(self) -> Any:
        """
        Finalize the edited value.

        Raises:
            InvalidValueError: If the edited value does not validate
        """
        if not self._valid:
            logger.warning(f"Rejected save of invalid value for {self._control!r}")
            raise InvalidValueError(f"Cannot save invalid value: {self._value!r}")
        return self._edit_control.save(self._value)

    def _render(self) -> Any:
        view = self._edit_control.render(self._value, self._on_change, self._valid)
        if self._config.debug_render and isinstance(view, ObjectView):
            logger.debug(f"Rendered edit view with fields {list(view.fields)}")
        return view

    def _on_change(self, new_value: Any) -> None:
        self._apply(new_value)

    def _apply(self, new_value: Any) -> None:
        was_valid = self._valid
        self._value = new_value
        self._valid = self._edit_control.validate(new_value)
        self._painter.refresh(self._render())

        self.value_changed.emit(new_value)
        if self._valid != was_valid:
            self.validity_changed.emit(self._valid)
