"""
Exceptions raised by pi_gpio.

Validation problems are raised synchronously, before any I/O happens.
Helper-process failures carry the diagnostic output of `gpio-admin`.
Filesystem failures are not wrapped: the underlying `OSError` reaches the caller.
"""
from typing import Sequence


class GPIOError(Exception):
    """Base class for all pi_gpio errors."""


class ValidationError(GPIOError, ValueError):
    """An unknown pin number or an invalid direction string."""


class BoardRevisionError(GPIOError, RuntimeError):
    """The board revision could not be read from the system information file."""


class HelperProcessError(GPIOError):
    """The `gpio-admin` helper exited non-zero or could not be started."""

    def __init__(self, command: Sequence[str], returncode: int | None, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"{' '.join(self.command)}: {detail}")
