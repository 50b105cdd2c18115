"""
Pin Operation Facade.

`GPIO` is the public entry point. It validates its arguments synchronously,
then hands export/unexport to the `gpio-admin` helper and direction/value
access to the sysfs state files. Every operation returns an asyncio.Task
and, when given one, also calls `callback(error, result)`:

    gpio = get_gpio()
    await gpio.open(11, "in pullup")
    value = await gpio.read(11)
    gpio.write(12, True, lambda err, _: print(err or "done"))

Operations on the same pin are not serialized; callers that issue
overlapping operations on one pin must order them themselves.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Set

from pi_gpio.config_loader import gpio_settings, load_config
from pi_gpio.deferred import Callback, deferred
from pi_gpio.errors import HelperProcessError
from pi_gpio.helper import GpioAdmin
from pi_gpio.models import Direction, ExportMode, PinOptions
from pi_gpio.pins import pin_mapping
from pi_gpio.registry import ExportRegistry
from pi_gpio.revision import CPUINFO_PATH, resolve_board_revision
from pi_gpio.sanitize import parse_options, sanitize_direction, sanitize_export_mode, sanitize_pin_number
from pi_gpio.sysfs import SysfsGpio

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO):
    """
    Configures the root logger for applications using pi_gpio.
    The library itself never installs handlers.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)-8s] %(name)s.%(funcName)s: %(message)s'
    )


class GPIO:
    """
    Drives header pins by physical pin number.
    The board revision is resolved once, when the facade is created.
    """
    rev: int
    mapping: Dict[int, int]
    helper: GpioAdmin
    sysfs: SysfsGpio
    registry: ExportRegistry
    export_mode: ExportMode
    _pending: Set[asyncio.Task]  # operations still running

    def __init__(self,
                 revision: Optional[int] = None,
                 helper: Optional[GpioAdmin] = None,
                 sysfs: Optional[SysfsGpio] = None,
                 registry: Optional[ExportRegistry] = None,
                 export_mode: ExportMode | str = ExportMode.AUTO,
                 cpuinfo_path: str = CPUINFO_PATH):
        self.rev = revision if revision is not None else resolve_board_revision(cpuinfo_path)
        self.mapping = pin_mapping(self.rev)
        self.helper = helper or GpioAdmin()
        self.sysfs = sysfs or SysfsGpio()
        self.registry = registry or ExportRegistry()
        self.export_mode = sanitize_export_mode(export_mode)
        self._pending = set()

    @classmethod
    def from_config(cls, config: Dict[str, Any] | str | Path | None = None) -> "GPIO":
        """
        Builds a facade from the `gpio` section of a configuration, given either
        as an already loaded dict or as the path of a YAML file to load.
        """
        if isinstance(config, (str, Path)):
            config = load_config(config)
        settings = gpio_settings(config)
        return cls(
            revision=settings["revision"],
            helper=GpioAdmin(settings["helper"]),
            sysfs=SysfsGpio(settings["sysfs_root"]),
            export_mode=settings["export_mode"],
            cpuinfo_path=settings["cpuinfo_path"],
        )

    def chip_pin(self, pin_number: Any) -> int:
        """Returns the chip pin identifier for a physical pin number."""
        return self.mapping[sanitize_pin_number(pin_number, self.mapping)]

    # --- Public operations ---

    def open(self, pin_number: Any, options: Any = "out", callback: Optional[Callback] = None):
        """
        Exports the pin with the pull mode from `options`, then sets its direction.
        `options` may be omitted in favour of a callback: open(pin, callback).
        """
        if callback is None and callable(options):
            callback, options = options, "out"
        pin = sanitize_pin_number(pin_number, self.mapping)
        parsed = parse_options(options)
        return deferred(self._open(pin, parsed), callback, self._pending)

    def close(self, pin_number: Any, callback: Optional[Callback] = None):
        """Unexports the pin."""
        pin = sanitize_pin_number(pin_number, self.mapping)
        return deferred(self._close(pin), callback, self._pending)

    export = open
    unexport = close

    def set_direction(self, pin_number: Any, direction: Any, callback: Optional[Callback] = None):
        pin = sanitize_pin_number(pin_number, self.mapping)
        direction = sanitize_direction(direction)
        return deferred(self._set_direction(pin, direction), callback, self._pending)

    def get_direction(self, pin_number: Any, callback: Optional[Callback] = None):
        """Resolves to the Direction currently stored for the pin."""
        pin = sanitize_pin_number(pin_number, self.mapping)
        return deferred(self._get_direction(pin), callback, self._pending)

    def read(self, pin_number: Any, callback: Optional[Callback] = None,
             export_mode: ExportMode | str | None = None):
        """Resolves to the pin value as an int (0 or 1)."""
        pin = sanitize_pin_number(pin_number, self.mapping)
        mode = self._resolve_export_mode(export_mode)
        return deferred(self._read(pin, mode), callback, self._pending)

    def write(self, pin_number: Any, value: Any, callback: Optional[Callback] = None,
              export_mode: ExportMode | str | None = None):
        """Writes "1" for a truthy `value` and "0" otherwise."""
        pin = sanitize_pin_number(pin_number, self.mapping)
        mode = self._resolve_export_mode(export_mode)
        data = "1" if value else "0"
        return deferred(self._write(pin, data, mode), callback, self._pending)

    # --- Coroutines behind the operations ---

    async def _open(self, pin: int, options: PinOptions):
        await self._export(pin, options, "open")
        await self._set_direction(pin, options.direction)

    async def _close(self, pin: int):
        chip = self.mapping[pin]
        try:
            await self.helper.unexport(chip)
        except HelperProcessError as e:
            self._report_error("close", pin, e)
            raise
        self.registry.discard(pin)
        logger.info(f"Unexported pin {pin} (gpio{chip})")

    async def _export(self, pin: int, options: PinOptions, method: str):
        chip = self.mapping[pin]
        try:
            await self.helper.export(chip, options.pull)
        except HelperProcessError as e:
            self._report_error(method, pin, e)
            raise
        self.registry.mark_exported(pin, options.direction)
        logger.info(f"Exported pin {pin} (gpio{chip}) as {options.direction.value}"
                    f"{' ' + options.pull.value if options.pull.value else ''}")

    async def _set_direction(self, pin: int, direction: Direction):
        await self.sysfs.write_attribute(self.mapping[pin], "direction", direction.value)

    async def _get_direction(self, pin: int) -> Direction:
        raw = await self.sysfs.read_attribute(self.mapping[pin], "direction")
        return sanitize_direction(raw.strip())

    async def _read(self, pin: int, mode: ExportMode) -> int:
        await self._auto_export(pin, Direction.IN, mode, "read")
        raw = await self.sysfs.read_attribute(self.mapping[pin], "value")
        return int(raw.strip())

    async def _write(self, pin: int, data: str, mode: ExportMode):
        await self._auto_export(pin, Direction.OUT, mode, "write")
        await self.sysfs.write_attribute(self.mapping[pin], "value", data)

    async def _auto_export(self, pin: int, direction: Direction, mode: ExportMode, method: str):
        if mode is ExportMode.OFF:
            return
        if mode is ExportMode.AUTO and self.registry.is_exported(pin):
            return
        logger.debug(f"Auto-exporting pin {pin} as {direction.value} before {method}")
        await self._export(pin, PinOptions(direction=direction), method)
        await self._set_direction(pin, direction)

    # --- Helpers ---

    def _resolve_export_mode(self, export_mode: ExportMode | str | None) -> ExportMode:
        if export_mode is None:
            return self.export_mode
        return sanitize_export_mode(export_mode)

    @staticmethod
    def _report_error(method: str, pin: int, error: HelperProcessError):
        logger.error(f"Error when trying to {method} pin {pin}: {error.stderr.strip() or error}")


# --- Process-wide default facade ---

_default_gpio: Optional[GPIO] = None


def get_gpio(config: Dict[str, Any] | str | Path | None = None) -> GPIO:
    """
    Returns the process-wide GPIO facade, creating it on first use from
    `config` (a loaded dict or a YAML file path, see GPIO.from_config).
    Creating it resolves the board revision, which raises BoardRevisionError
    when not running on a supported board. `config` only applies on creation.
    """
    global _default_gpio
    if _default_gpio is None:
        _default_gpio = GPIO.from_config(config)
    return _default_gpio


def reset_gpio():
    """Drops the process-wide facade, so the next get_gpio() builds a new one."""
    global _default_gpio
    _default_gpio = None
