"""Hyprland adapter, talking directly to the command socket."""

import asyncio
import contextlib
from logging import Logger

from ..ipc_paths import get_hyprland_signature, get_hyprland_socket
from ..models import CommandError, CompositorConnectionError


def hyprland_directives(workspace: int, monitor: str) -> list[str]:
    """Return the Hyprland commands binding `workspace` to `monitor`.

    The first one makes `monitor` the default output of the workspace,
    the second one moves the workspace there if it already exists.
    Values are substituted verbatim.
    """
    return [
        f"keyword workspace {workspace},monitor:{monitor}",
        f"dispatch moveworkspacetomonitor {workspace} {monitor}",
    ]


class HyprlandSocketBackend:
    """Hyprland backend writing to the `.socket.sock` control socket.

    Commands are fire and forget: no reply is read back.
    """

    name = "hyprland"

    def __init__(self) -> None:
        self.socket_path: str | None = None
        self._writer: asyncio.StreamWriter | None = None

    def describe(self, workspace: int, monitor: str) -> list[str]:
        return hyprland_directives(workspace, monitor)

    async def init(self, *, log: Logger) -> None:
        self.socket_path = get_hyprland_socket(get_hyprland_signature())
        log.debug("connecting to %s", self.socket_path)
        try:
            _, self._writer = await asyncio.open_unix_connection(self.socket_path)
        except OSError as e:
            msg = f"failed to connect to Hyprland socket at {self.socket_path}: {e}"
            raise CompositorConnectionError(msg) from e

    async def _send(self, message: str, *, log: Logger) -> None:
        if self._writer is None:
            msg = "no connection to Hyprland"
            raise CompositorConnectionError(msg)
        log.debug(message)
        try:
            self._writer.write(f"{message}\n".encode())
            await self._writer.drain()
        except OSError as e:
            msg = f"failed to send command '{message}': {e}"
            raise CommandError(msg) from e

    async def assign_workspace(self, workspace: int, monitor: str, *, log: Logger) -> None:
        for command in hyprland_directives(workspace, monitor):
            await self._send(command, log=log)

    async def flush(self, *, log: Logger) -> None:
        """Nothing is queued."""

    async def close(self, *, log: Logger) -> None:
        if self._writer is None:
            return
        writer, self._writer = self._writer, None
        writer.close()
        with contextlib.suppress(ConnectionError):
            await writer.wait_closed()
        log.debug("closed %s", self.socket_path)
