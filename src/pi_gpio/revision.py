"""
Board Revision Resolver.

Early Raspberry Pi boards (hardware revision codes 0002 and below) wired
header pins 3, 5 and 13 to different chip pins than every later board.
This module reads the revision code from /proc/cpuinfo and reduces it to
a revision class: 1 for those early boards, 2 for everything else.
"""
import logging
from pathlib import Path

from pi_gpio.errors import BoardRevisionError

CPUINFO_PATH = "/proc/cpuinfo"

logger = logging.getLogger(__name__)


def parse_revision(cpuinfo: str) -> int:
    """
    Extracts the revision class from the text of a cpuinfo file.

    The first line starting with "Revision" is used, e.g. "Revision : a02082".
    """
    for line in cpuinfo.splitlines():
        if not line.startswith("Revision"):
            continue
        _, sep, value = line.partition(":")
        value = value.strip()
        if not sep or not value:
            raise BoardRevisionError(f"Malformed revision line: {line!r}")
        try:
            code = int(value, 16)
        except ValueError as e:
            raise BoardRevisionError(f"Revision is not hexadecimal: {value!r}") from e
        return 1 if code < 3 else 2

    raise BoardRevisionError("No 'Revision' line found in system information")


def resolve_board_revision(cpuinfo_path: str | Path = CPUINFO_PATH) -> int:
    """
    Reads the system information file and returns the board revision class.

    There is no fallback: a board whose revision cannot be determined
    cannot be driven safely, so any failure raises BoardRevisionError.
    """
    path = Path(cpuinfo_path)
    try:
        text = path.read_text()
    except OSError as e:
        raise BoardRevisionError(f"Cannot read {path}: {e}") from e

    revision = parse_revision(text)
    logger.info(f"Detected board revision class {revision} from {path}")
    return revision
