"""
Access to the per-pin state files of the kernel's virtual GPIO filesystem.

For chip pin N the kernel exposes <root>/gpio<N>/direction ("in"/"out")
and <root>/gpio<N>/value ("0"/"1") once the pin has been exported.
The blocking file I/O is handed to the event loop's default executor.
"""
import asyncio
import logging
from pathlib import Path

SYSFS_ROOT = "/sys/devices/virtual/gpio"

logger = logging.getLogger(__name__)


class SysfsGpio:
    root: Path

    def __init__(self, root: str | Path = SYSFS_ROOT):
        self.root = Path(root)

    def pin_path(self, chip_pin: int, attribute: str) -> Path:
        return self.root / f"gpio{chip_pin}" / attribute

    async def read_attribute(self, chip_pin: int, attribute: str) -> str:
        path = self.pin_path(chip_pin, attribute)
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(None, path.read_text)
        logger.debug(f"Read {data.strip()!r} from {path}")
        return data

    async def write_attribute(self, chip_pin: int, attribute: str, value: str):
        """Replaces the whole contents of the attribute file with `value`."""
        path = self.pin_path(chip_pin, attribute)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, path.write_text, value)
        logger.debug(f"Wrote {value!r} to {path}")
