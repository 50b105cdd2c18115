"""
Value types shared by the sanitizers, the helper invoker and the facade.
"""
from dataclasses import dataclass, field
from enum import Enum


class Direction(str, Enum):
    IN = "in"
    OUT = "out"


class PullMode(str, Enum):
    """Internal resistor configuration, applied when a pin is exported."""
    NONE = ""
    PULLUP = "pullup"
    PULLDOWN = "pulldown"


class ExportMode(str, Enum):
    """How `read` and `write` treat a pin that may not be exported yet."""
    AUTO = "auto"  # export if the registry does not hold the pin
    OFF = "off"
    FORCE = "force"


@dataclass(frozen=True, kw_only=True)
class PinOptions:
    """Result of parsing an options string such as "in pullup"."""
    direction: Direction = field(default=Direction.OUT)
    pull: PullMode = field(default=PullMode.NONE)
