"""
Helper-Process Invoker.

Exporting and unexporting a pin needs root, so it is delegated to the
setuid `gpio-admin` helper:

    gpio-admin export <chip-pin> [pullup|pulldown]
    gpio-admin unexport <chip-pin>

Each call spawns a fresh child process. There is no retry and no timeout.
"""
import asyncio
import logging
from typing import List

from pi_gpio.errors import HelperProcessError
from pi_gpio.models import PullMode

DEFAULT_HELPER = "gpio-admin"

logger = logging.getLogger(__name__)


class GpioAdmin:
    """Runs the privileged helper binary as an asyncio subprocess."""
    binary: str

    def __init__(self, binary: str = DEFAULT_HELPER):
        self.binary = binary

    async def export(self, chip_pin: int, pull: PullMode = PullMode.NONE) -> str:
        args = ["export", str(chip_pin)]
        pull = PullMode(pull)
        if pull is not PullMode.NONE:
            args.append(pull.value)
        return await self._run(args)

    async def unexport(self, chip_pin: int) -> str:
        return await self._run(["unexport", str(chip_pin)])

    async def _run(self, args: List[str]) -> str:
        """
        Runs the helper with `args` and returns its standard output.
        Raises HelperProcessError carrying stderr on a non-zero exit or
        when the binary cannot be started.
        """
        command = [self.binary, *args]
        logger.debug(f"Running {' '.join(command)}")
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise HelperProcessError(command, None, str(e)) from e

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise HelperProcessError(command, process.returncode, stderr.decode(errors="replace"))
        return stdout.decode(errors="replace")
