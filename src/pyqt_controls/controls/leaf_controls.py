"""
Leaf controls: single scalar values.

Each leaf pairs a Control (read view, raw codec) with an EditControl
(validation, save, edit view). Leaves normalize missing or malformed raw input
to their default instead of raising.

| control         | typed value     | edit value    | widget (read / edit)     |
|-----------------|-----------------|---------------|--------------------------|
| StringControl   | str             | str           | line_edit / line_edit    |
| NumberControl   | int or None     | text          | spin_box / line_edit     |
| BooleanControl  | bool            | bool          | check_box / check_box    |
| DurationControl | timedelta/None  | text "1h30m"  | line_edit / line_edit    |
| SelectControl   | option or None  | option        | combo_box / combo_box    |
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Mapping, Optional, Tuple

from pyqt_controls.controls.views import LeafView
from pyqt_controls.exceptions import SchemaError
from pyqt_controls.protocols.control_protocols import Control, EditControl

logger = logging.getLogger(__name__)

OnChange = Callable[[Any], None]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


# ========== STRING ==========

@dataclass(frozen=True)
class StringEditControl(EditControl):
    optional: bool = False

    def validate(self, value: Any) -> bool:
        return self.optional or not _is_blank(value)

    def save(self, value: Any) -> str:
        return "" if value is None else str(value)

    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> LeafView:
        return LeafView("line_edit", value, on_change, is_valid=is_valid, optional=self.optional)


@dataclass(frozen=True)
class StringControl(Control):
    """Free text. Non-optional strings must not be blank."""

    optional: bool = False

    _control_id = "string"

    def default(self) -> str:
        return ""

    def construct(self, value: Any) -> str:
        return self.default() if value is None else str(value)

    def serialize(self, value: Any) -> str:
        return self.construct(value)

    def render(self, value: Any, on_change: OnChange) -> LeafView:
        return LeafView("line_edit", value, on_change, optional=self.optional)

    def edit_control(self) -> StringEditControl:
        return StringEditControl(self.optional)

    def edit(self, value: Any) -> str:
        return self.construct(value)

    def is_singular(self) -> bool:
        return True


# ========== NUMBER ==========

def parse_number(value: Any) -> Optional[int]:
    """Parse an int from an int or text; None when it does not parse."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class NumberEditControl(EditControl):
    """Edits a number as text so partially typed input stays representable."""

    optional: bool = False
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    def validate(self, value: Any) -> bool:
        if _is_blank(value):
            return self.optional
        number = parse_number(value)
        if number is None:
            return False
        if self.minimum is not None and number < self.minimum:
            return False
        if self.maximum is not None and number > self.maximum:
            return False
        return True

    def save(self, value: Any) -> Optional[int]:
        return None if _is_blank(value) else parse_number(value)

    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> LeafView:
        return LeafView("line_edit", value, on_change, is_valid=is_valid, optional=self.optional)


@dataclass(frozen=True)
class NumberControl(Control):
    """Integer with an optional inclusive range. Optional numbers default to None."""

    optional: bool = False
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    _control_id = "number"

    def __post_init__(self):
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise SchemaError(f"Number range is empty: minimum {self.minimum} > maximum {self.maximum}")

    def default(self) -> Optional[int]:
        if self.optional:
            return None
        if self.minimum is not None and self.minimum > 0:
            return self.minimum
        if self.maximum is not None and self.maximum < 0:
            return self.maximum
        return 0

    def construct(self, value: Any) -> Optional[int]:
        if _is_blank(value):
            return self.default()
        number = parse_number(value)
        if number is None:
            logger.debug(f"Number control could not parse {value!r}; using default")
            return self.default()
        return number

    def serialize(self, value: Any) -> Optional[int]:
        return self.construct(value)

    def render(self, value: Any, on_change: OnChange) -> LeafView:
        return LeafView(
            "spin_box", value, on_change,
            optional=self.optional,
            value_range=(self.minimum, self.maximum),
        )

    def edit_control(self) -> NumberEditControl:
        return NumberEditControl(self.optional, self.minimum, self.maximum)

    def edit(self, value: Any) -> str:
        return "" if value is None else str(value)

    def is_singular(self) -> bool:
        return True

    @classmethod
    def from_description(cls, description: Mapping[str, Any]) -> NumberControl:
        return cls(
            optional=bool(description.get("optional", False)),
            minimum=description.get("minimum"),
            maximum=description.get("maximum"),
        )


# ========== BOOLEAN ==========

@dataclass(frozen=True)
class BooleanEditControl(EditControl):
    optional: bool = False

    def validate(self, value: Any) -> bool:
        if value is None:
            return self.optional
        return isinstance(value, bool)

    def save(self, value: Any) -> bool:
        return bool(value)

    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> LeafView:
        return LeafView("check_box", value, on_change, is_valid=is_valid, optional=self.optional)


@dataclass(frozen=True)
class BooleanControl(Control):
    optional: bool = False

    _control_id = "bool"

    def default(self) -> bool:
        return False

    def construct(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is not None:
            logger.debug(f"Boolean control got non-bool {value!r}; using default")
        return self.default()

    def serialize(self, value: Any) -> bool:
        return self.construct(value)

    def render(self, value: Any, on_change: OnChange) -> LeafView:
        return LeafView("check_box", value, on_change, optional=self.optional)

    def edit_control(self) -> BooleanEditControl:
        return BooleanEditControl(self.optional)

    def edit(self, value: Any) -> bool:
        return self.construct(value)

    def is_singular(self) -> bool:
        return True


# ========== DURATION ==========

_DURATION_RE = re.compile(r"^(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?$")
_SECONDS_RE = re.compile(r"^\d+$")


def parse_duration(value: Any) -> Optional[timedelta]:
    """
    Parse a compact duration: "1d2h3m4s", any unit may be omitted.

    A bare integer is read as seconds. Returns None when it does not parse.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return _build_duration(seconds=value) if value >= 0 else None
    if not isinstance(value, str):
        return None

    text = value.strip().replace(" ", "")
    if _SECONDS_RE.match(text):
        return _build_duration(seconds=int(text))
    match = _DURATION_RE.match(text)
    if not text or match is None:
        return None
    days, hours, minutes, seconds = (int(part) if part else 0 for part in match.groups())
    return _build_duration(days=days, hours=hours, minutes=minutes, seconds=seconds)


def _build_duration(**parts: int) -> Optional[timedelta]:
    # Out of timedelta's range counts as unparseable
    try:
        return timedelta(**parts)
    except OverflowError:
        logger.debug(f"Duration out of range: {parts!r}")
        return None


def format_duration(duration: timedelta) -> str:
    """Format a duration compactly: timedelta(hours=1, minutes=30) -> "1h30m"."""
    total = int(duration.total_seconds())
    if total <= 0:
        return "0s"
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = [(days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s")]
    return "".join(f"{amount}{unit}" for amount, unit in parts if amount)


@dataclass(frozen=True)
class DurationEditControl(EditControl):
    optional: bool = False

    def validate(self, value: Any) -> bool:
        if _is_blank(value):
            return self.optional
        return parse_duration(value) is not None

    def save(self, value: Any) -> Optional[timedelta]:
        return None if _is_blank(value) else parse_duration(value)

    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> LeafView:
        return LeafView("line_edit", value, on_change, is_valid=is_valid, optional=self.optional)


@dataclass(frozen=True)
class DurationControl(Control):
    """Time span. Raw form is the compact text ("1h30m"); typed form is a timedelta."""

    optional: bool = False

    _control_id = "duration"

    def default(self) -> Optional[timedelta]:
        return None if self.optional else timedelta(0)

    def construct(self, value: Any) -> Optional[timedelta]:
        if _is_blank(value):
            return self.default()
        duration = parse_duration(value)
        if duration is None:
            logger.debug(f"Duration control could not parse {value!r}; using default")
            return self.default()
        return duration

    def serialize(self, value: Any) -> Optional[str]:
        duration = self.construct(value)
        return None if duration is None else format_duration(duration)

    def render(self, value: Any, on_change: OnChange) -> LeafView:
        def on_text_change(text: Any) -> None:
            # Partially typed text stays in the widget until it parses.
            duration = parse_duration(text)
            if duration is not None:
                on_change(duration)

        return LeafView("line_edit", self.edit(value), on_text_change, optional=self.optional)

    def edit_control(self) -> DurationEditControl:
        return DurationEditControl(self.optional)

    def edit(self, value: Any) -> str:
        duration = parse_duration(value)
        return "" if duration is None else format_duration(duration)

    def is_singular(self) -> bool:
        return True


# ========== SELECT ==========

@dataclass(frozen=True)
class SelectEditControl(EditControl):
    options: Tuple[Any, ...] = ()
    optional: bool = False

    def validate(self, value: Any) -> bool:
        if value is None:
            return self.optional
        return value in self.options

    def save(self, value: Any) -> Any:
        return value

    def render(self, value: Any, on_change: OnChange, is_valid: bool) -> LeafView:
        return LeafView(
            "combo_box", value, on_change,
            is_valid=is_valid, optional=self.optional, options=self.options,
        )


@dataclass(frozen=True)
class SelectControl(Control):
    """One value out of a fixed list of options."""

    options: Tuple[Any, ...] = ()
    optional: bool = False

    _control_id = "select"

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise SchemaError("Select control requires at least one option")
        try:
            unique = len(set(self.options))
        except TypeError as e:
            raise SchemaError(f"Select control options must be hashable: {self.options!r}") from e
        if unique != len(self.options):
            raise SchemaError(f"Select control options must be unique: {self.options!r}")

    def default(self) -> Any:
        return None if self.optional else self.options[0]

    def construct(self, value: Any) -> Any:
        if value in self.options:
            return value
        if value is not None:
            logger.debug(f"Select control got unknown option {value!r}; using default")
        return self.default()

    def serialize(self, value: Any) -> Any:
        return self.construct(value)

    def render(self, value: Any, on_change: OnChange) -> LeafView:
        return LeafView("combo_box", value, on_change, optional=self.optional, options=self.options)

    def edit_control(self) -> SelectEditControl:
        return SelectEditControl(self.options, self.optional)

    def edit(self, value: Any) -> Any:
        return self.construct(value)

    def is_singular(self) -> bool:
        return True

    @classmethod
    def from_description(cls, description: Mapping[str, Any]) -> SelectControl:
        options = description.get("options")
        if not isinstance(options, (list, tuple)):
            raise SchemaError(f"Select control requires an 'options' list, got {options!r}")
        return cls(tuple(options), optional=bool(description.get("optional", False)))
