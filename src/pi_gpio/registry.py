"""
Exported-pin registry.

Remembers which physical pins this process has exported and in which
direction, so `read` and `write` can skip redundant exports. It is owned by
a GPIO facade and only changed when that facade exports or unexports a pin.
"""
import logging
from typing import Optional, Set

from pi_gpio.models import Direction

logger = logging.getLogger(__name__)


class ExportRegistry:
    input_pins: Set[int]
    output_pins: Set[int]

    def __init__(self):
        self.input_pins = set()
        self.output_pins = set()

    def mark_exported(self, pin: int, direction: Direction):
        """Records `pin` as exported in `direction`, dropping any previous direction."""
        self.discard(pin)
        if Direction(direction) is Direction.IN:
            self.input_pins.add(pin)
        else:
            self.output_pins.add(pin)
        logger.debug(f"Pin {pin} tracked as exported ({Direction(direction).value})")

    def discard(self, pin: int):
        self.input_pins.discard(pin)
        self.output_pins.discard(pin)

    def is_exported(self, pin: int, direction: Optional[Direction] = None) -> bool:
        if direction is None:
            return pin in self.input_pins or pin in self.output_pins
        if Direction(direction) is Direction.IN:
            return pin in self.input_pins
        return pin in self.output_pins

    def clear(self):
        self.input_pins.clear()
        self.output_pins.clear()
