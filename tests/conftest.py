"""
Pytest Configuration and Fixtures for the pi_gpio project.

The kernel's virtual GPIO filesystem is replaced by a temporary directory
and the privileged `gpio-admin` helper by `FakeGpioAdmin`, which creates and
removes the per-pin state files the way the kernel would. This lets the
whole facade run on any development machine, not just a Raspberry Pi.
"""

import sys
import logging
from pathlib import Path

import pytest

from pi_gpio.errors import HelperProcessError
from pi_gpio.gpio import GPIO
from pi_gpio.helper import GpioAdmin
from pi_gpio.registry import ExportRegistry
from pi_gpio.sysfs import SysfsGpio


class FakeGpioAdmin(GpioAdmin):
    """
    Stands in for the helper binary. Records every call and emulates the
    kernel by creating gpio<N>/direction and gpio<N>/value on export.
    Set `fail_with` to make the next calls fail like a non-zero exit.
    """
    def __init__(self, root: Path):
        super().__init__("fake-gpio-admin")
        self.root = root
        self.calls: list = []
        self.fail_with: str | None = None

    async def _run(self, args):
        self.calls.append(list(args))
        if self.fail_with is not None:
            raise HelperProcessError([self.binary, *args], 1, self.fail_with)

        pin_dir = self.root / f"gpio{args[1]}"
        if args[0] == "export":
            pin_dir.mkdir(parents=True, exist_ok=True)
            (pin_dir / "direction").write_text("in")
            (pin_dir / "value").write_text("0")
        elif args[0] == "unexport":
            for child in pin_dir.iterdir():
                child.unlink()
            pin_dir.rmdir()
        return ""


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """
    Configures the Python logging framework globally for all tests,
    since tests never go through an application's setup_logging().
    """
    formatter = logging.Formatter(fmt="%(levelname)-8s %(message)s - %(funcName)s:%(lineno)d ")
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


@pytest.fixture
def sysfs_root(tmp_path) -> Path:
    root = tmp_path / "gpio"
    root.mkdir()
    return root


@pytest.fixture
def fake_helper(sysfs_root) -> FakeGpioAdmin:
    return FakeGpioAdmin(sysfs_root)


@pytest.fixture
def registry() -> ExportRegistry:
    return ExportRegistry()


@pytest.fixture
def gpio(fake_helper, sysfs_root, registry) -> GPIO:
    """A revision 2 facade wired to the fake helper and the temporary sysfs tree."""
    return GPIO(revision=2, helper=fake_helper, sysfs=SysfsGpio(sysfs_root), registry=registry)


@pytest.fixture
def cpuinfo(tmp_path):
    """Returns a function writing a cpuinfo file with the given revision code."""
    def _write(revision: str) -> Path:
        path = tmp_path / "cpuinfo"
        path.write_text(
            "processor\t: 0\n"
            "model name\t: ARMv6-compatible processor rev 7 (v6l)\n"
            "Hardware\t: BCM2708\n"
            f"Revision\t: {revision}\n"
            "Serial\t\t: 00000000deadbeef\n"
        )
        return path
    return _write
