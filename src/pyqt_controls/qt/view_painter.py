"""
Paints view descriptions into PyQt6 widgets.

Composites become a QFormLayout of titled rows (nested composites in a
QGroupBox); leaves become the adapter registered for their widget_id.

A painted tree is refreshed in place rather than rebuilt: every leaf widget's
change signal is connected once to a callback slot, and each refresh points
the slot at the on_change of the newest view. Widgets keep focus and cursor
position while callbacks always see the current value snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt6.QtWidgets import QFormLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from pyqt_controls.controls.views import LeafView, ObjectView
from pyqt_controls.protocols.controls_config import ControlsConfig, get_controls_config
from pyqt_controls.protocols.widget_protocols import NoneCapable, OptionsSelectable, RangeConfigurable
from pyqt_controls.qt import widget_adapters  # noqa: F401  registers the built-in adapters
from pyqt_controls.qt.widget_registry import get_widget_class

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]

_INT_MIN = -2147483647  # One above QSpinBox's floor, which optional fields reserve for None
_INT_MAX = 2147483647


class CallbackSlot:
    """Forwards widget changes to whichever callback the latest view carries."""

    def __init__(self, target: Callable[[Any], None]):
        self.target = target

    def __call__(self, value: Any) -> None:
        self.target(value)


class ViewPainter:
    """
    Paints and refreshes one view tree.

    Usage:
        painter = ViewPainter()
        widget = painter.paint(control.render(value, on_change))
        ...
        painter.refresh(control.render(new_value, on_change))
    """

    def __init__(self, config: Optional[ControlsConfig] = None):
        self._config = config or get_controls_config()
        self._leaves: Dict[Path, Tuple[QWidget, CallbackSlot]] = {}
        self._root: Optional[QWidget] = None

    @property
    def root(self) -> Optional[QWidget]:
        return self._root

    def leaf_widget(self, path: Tuple[str, ...]) -> QWidget:
        """Return the painted widget of the leaf at a field path, e.g. ("address", "city")."""
        if tuple(path) not in self._leaves:
            raise KeyError(f"No painted leaf at '{'.'.join(path)}'. Available: {['.'.join(p) for p in self._leaves]}")
        return self._leaves[tuple(path)][0]

    def paint(self, view: Any, parent: Optional[QWidget] = None) -> QWidget:
        """Build widgets for a view tree, replacing anything painted before."""
        self._leaves.clear()
        self._root = self._paint(view, (), parent)
        if self._config.debug_render:
            logger.debug(f"Painted view with {len(self._leaves)} leaves")
        return self._root

    def refresh(self, view: Any) -> None:
        """
        Bring the painted widgets in line with a new view of the same shape.

        Raises:
            RuntimeError: If nothing has been painted yet
            ValueError: If the view's shape differs from the painted tree
        """
        if self._root is None:
            raise RuntimeError("paint() must be called before refresh()")
        self._refresh(view, ())

    # ========== PAINT ==========

    def _paint(self, view: Any, path: Path, parent: Optional[QWidget]) -> QWidget:
        if isinstance(view, ObjectView):
            return self._paint_object(view, path, parent)
        if isinstance(view, LeafView):
            return self._paint_leaf(view, path, parent)
        raise TypeError(f"Cannot paint {type(view).__name__} at '{'.'.join(path)}'")

    def _paint_object(self, view: ObjectView, path: Path, parent: Optional[QWidget]) -> QWidget:
        layout_config = self._config.layout
        container = QWidget(parent)
        layout = QFormLayout(container)
        layout.setSpacing(layout_config.content_layout_spacing)
        layout.setContentsMargins(*layout_config.content_layout_margins)

        for row in view.rows:
            row_path = path + (row.field,)
            if isinstance(row.view, ObjectView):
                group = QGroupBox(row.title, container)
                group_layout = QVBoxLayout(group)
                group_layout.setSpacing(layout_config.groupbox_spacing)
                group_layout.setContentsMargins(*layout_config.groupbox_margins)
                group_layout.addWidget(self._paint(row.view, row_path, group))
                layout.addRow(group)
            else:
                label = QLabel(f"{row.title}{self._config.title_suffix}", container)
                layout.addRow(label, self._paint(row.view, row_path, container))
        return container

    def _paint_leaf(self, view: LeafView, path: Path, parent: Optional[QWidget]) -> QWidget:
        widget = get_widget_class(view.widget_id)(parent)
        widget.setObjectName(".".join(path))

        if isinstance(widget, NoneCapable):
            widget.set_allow_none(view.optional)
        if isinstance(widget, OptionsSelectable):
            widget.set_options(view.options, allow_empty=view.optional)
        if isinstance(widget, RangeConfigurable) and view.value_range is not None:
            minimum, maximum = view.value_range
            widget.configure_range(
                _INT_MIN if minimum is None else minimum,
                _INT_MAX if maximum is None else maximum,
            )

        widget.set_value(view.value)
        slot = CallbackSlot(view.on_change)
        widget.connect_change_signal(slot)
        self._apply_validity(widget, view.is_valid)
        self._leaves[path] = (widget, slot)
        return widget

    # ========== REFRESH ==========

    def _refresh(self, view: Any, path: Path) -> None:
        if isinstance(view, ObjectView):
            for row in view.rows:
                self._refresh(row.view, path + (row.field,))
            return

        entry = self._leaves.get(path)
        if entry is None:
            raise ValueError(f"View shape changed at '{'.'.join(path)}'; paint() it again")
        widget, slot = entry
        slot.target = view.on_change

        if widget.get_value() != view.value:
            if self._config.debug_render:
                logger.debug(f"Refreshing '{'.'.join(path)}': {widget.get_value()!r} -> {view.value!r}")
            widget.blockSignals(True)
            try:
                widget.set_value(view.value)
            finally:
                widget.blockSignals(False)
        self._apply_validity(widget, view.is_valid)

    def _apply_validity(self, widget: QWidget, is_valid: Optional[bool]) -> None:
        # Read views carry no validity and are never marked invalid
        invalid = is_valid is False
        widget.setProperty("valid", not invalid)
        widget.setStyleSheet(self._config.invalid_stylesheet if invalid else "")
