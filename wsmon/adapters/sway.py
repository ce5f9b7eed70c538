"""Sway adapter, using the i3ipc request/reply client."""

from logging import Logger

from i3ipc.aio import Connection

from ..models import CommandError, CompositorConnectionError


def sway_command(workspace: int, monitor: str) -> str:
    """Return the Sway command focusing `workspace` and moving it to `monitor`."""
    return f"workspace number {workspace}, move workspace to output {monitor}"


class SwayBackend:
    """Sway backend.

    Each assignment is one command; the replies are checked and the first
    failure is reported with Sway's own error text.
    """

    name = "sway"

    def __init__(self, socket_path: str | None = None) -> None:
        self.socket_path = socket_path
        self._conn: Connection | None = None

    def describe(self, workspace: int, monitor: str) -> list[str]:
        return [sway_command(workspace, monitor)]

    async def init(self, *, log: Logger) -> None:
        try:
            self._conn = await Connection(socket_path=self.socket_path, auto_reconnect=False).connect()
        except Exception as e:  # noqa: BLE001  # i3ipc raises a bare Exception when no socket is found
            msg = f"failed to connect to Sway: {e}"
            raise CompositorConnectionError(msg) from e
        log.debug("connected to Sway")

    async def assign_workspace(self, workspace: int, monitor: str, *, log: Logger) -> None:
        if self._conn is None:
            msg = "no connection to Sway"
            raise CompositorConnectionError(msg)
        command = sway_command(workspace, monitor)
        log.debug(command)
        try:
            replies = await self._conn.command(command)
        except (OSError, ValueError, AssertionError) as e:
            msg = f"failed to run Sway command: {e!r}"
            raise CompositorConnectionError(msg) from e
        # i3ipc returns no reply at all when Sway closed the socket
        if not replies:
            msg = "failed to run Sway command: empty reply"
            raise CompositorConnectionError(msg)

        for reply in replies:
            if not reply.success:
                msg = f"Sway command failed: {reply.error}"
                raise CommandError(msg)

    async def flush(self, *, log: Logger) -> None:
        """Nothing is queued."""

    async def close(self, *, log: Logger) -> None:
        """Drop the connection reference, i3ipc owns the socket."""
        self._conn = None
