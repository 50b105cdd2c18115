"""
pi_gpio

This package drives Raspberry Pi GPIO pins through the kernel's virtual
GPIO filesystem, using the privileged `gpio-admin` helper to export and
unexport pins. Every pin operation can be awaited or given a callback.
"""
__version__ = "0.1.0"

from pi_gpio.errors import BoardRevisionError, GPIOError, HelperProcessError, ValidationError
from pi_gpio.gpio import GPIO, get_gpio, reset_gpio, setup_logging
from pi_gpio.models import Direction, ExportMode, PinOptions, PullMode

__all__ = [
    "GPIO",
    "get_gpio",
    "reset_gpio",
    "setup_logging",
    "Direction",
    "ExportMode",
    "PinOptions",
    "PullMode",
    "GPIOError",
    "ValidationError",
    "HelperProcessError",
    "BoardRevisionError",
]
