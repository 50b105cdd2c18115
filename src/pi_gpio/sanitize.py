"""
Input Sanitizers.

Pure functions that validate and normalize what callers hand to the facade.
They run before any helper-process or filesystem access.
"""
import re
from typing import Any, Mapping, Optional

from pi_gpio.errors import ValidationError
from pi_gpio.models import Direction, ExportMode, PinOptions, PullMode

_PIN_PATTERN = re.compile(r"[+-]?[0-9]+")

_IN_WORDS = ("in", "input")
_OUT_WORDS = ("out", "output", "")
_PULLUP_WORDS = ("pullup", "up")
_PULLDOWN_WORDS = ("pulldown", "down")


def sanitize_pin_number(value: Any, mapping: Mapping[int, int]) -> int:
    """
    Returns the physical pin number as an int.

    Accepts ints and base-10 numeric strings. Raises ValidationError unless
    the number is a key of `mapping`.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Pin number isn't valid: {value!r}")
    if isinstance(value, int):
        pin = value
    else:
        text = str(value).strip()
        # ASCII digits only; int() alone would also take "1_3" or other scripts' digits
        if not _PIN_PATTERN.fullmatch(text):
            raise ValidationError(f"Pin number isn't valid: {value!r}")
        pin = int(text, 10)

    if pin not in mapping:
        raise ValidationError(f"Pin number isn't valid: {value!r}")
    return pin


def sanitize_direction(value: Optional[str]) -> Direction:
    """Normalizes "in"/"input" and "out"/"output"/"" (or None) to a Direction."""
    if isinstance(value, Direction):
        return value
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"Direction must be a string, got {value!r}")
    direction = (value or "").strip().lower()
    if direction in _IN_WORDS:
        return Direction.IN
    if direction in _OUT_WORDS:
        return Direction.OUT
    raise ValidationError(f"Direction must be 'input' or 'output', got {value!r}")


def parse_options(options: Optional[str]) -> PinOptions:
    """
    Parses a space separated options string such as "in pullup".

    Recognised tokens: "in"/"input" select the input direction,
    "pullup"/"up" and "pulldown"/"down" select the pull resistor. The
    direction defaults to out and the pull to none. Parsing is lenient:
    unknown tokens are ignored rather than rejected, and a later pull token
    wins over an earlier one.
    """
    direction = Direction.OUT
    pull = PullMode.NONE
    for token in (options or "").split():
        if token in _IN_WORDS:
            direction = Direction.IN
        elif token in _PULLUP_WORDS:
            pull = PullMode.PULLUP
        elif token in _PULLDOWN_WORDS:
            pull = PullMode.PULLDOWN
    return PinOptions(direction=direction, pull=pull)


def sanitize_export_mode(value: Any) -> ExportMode:
    """
    Normalizes "auto"/"off"/"force" (any case, "" meaning auto) to an ExportMode.
    False is read as off, since YAML loads a bare `off` as a boolean.
    """
    if isinstance(value, ExportMode):
        return value
    if value is False:
        return ExportMode.OFF
    if not isinstance(value, str):
        raise ValidationError(f"Export mode must be 'auto', 'off' or 'force', got {value!r}")
    try:
        return ExportMode(value.strip().lower() or ExportMode.AUTO.value)
    except ValueError:
        raise ValidationError(f"Export mode must be 'auto', 'off' or 'force', got {value!r}") from None
