"""Hyprland adapter sending every command in one `hyprctl --batch` call."""

import asyncio
import shutil
from logging import Logger

from ..constants import HYPRCTL_EXECUTABLE
from ..models import CommandError, PreconditionError
from .hyprland import hyprland_directives

BATCH_SEPARATOR = " ; "


class HyprctlBatchBackend:
    """Hyprland backend using the `hyprctl` program.

    Assignments are queued and sent in a single round trip by `flush`,
    so a failure can't be tied to one workspace.
    """

    name = "hyprland-batch"

    def __init__(self, executable: str = HYPRCTL_EXECUTABLE) -> None:
        self.executable = executable
        self.executable_path: str | None = None
        self.commands: list[str] = []

    def describe(self, workspace: int, monitor: str) -> list[str]:
        return hyprland_directives(workspace, monitor)

    def batch(self) -> str:
        """Return the queued commands as one batch argument."""
        return BATCH_SEPARATOR.join(self.commands)

    async def init(self, *, log: Logger) -> None:
        self.executable_path = shutil.which(self.executable)
        if self.executable_path is None:
            msg = f"{self.executable} not found in PATH"
            raise PreconditionError(msg)
        log.debug("using %s", self.executable_path)

    async def assign_workspace(self, workspace: int, monitor: str, *, log: Logger) -> None:
        self.commands.extend(hyprland_directives(workspace, monitor))

    async def flush(self, *, log: Logger) -> None:
        if not self.commands:
            return
        assert self.executable_path, "init() must succeed before flush()"
        batch = self.batch()
        log.debug("%s --batch %s", self.executable, batch)
        proc = await asyncio.create_subprocess_exec(
            self.executable_path,
            "--batch",
            batch,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        stdout, _ = await proc.communicate()
        output = stdout.decode("utf-8", errors="replace")
        self.commands.clear()
        if proc.returncode != 0:
            msg = f"{self.executable} exited with status {proc.returncode}: {output}"
            raise CommandError(msg)
        log.debug(output.rstrip())

    async def close(self, *, log: Logger) -> None:
        """No persistent connection is held."""
