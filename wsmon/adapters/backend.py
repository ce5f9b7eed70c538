"""Backend interface shared by the compositor adapters."""

from logging import Logger
from typing import Protocol, runtime_checkable


@runtime_checkable
class WorkspaceBackend(Protocol):
    """Protocol every compositor backend implements.

    All methods that perform logging take a keyword-only `log` parameter,
    so the caller decides where the messages go.

    Lifecycle: `init` once, then `assign_workspace` for each workspace,
    then `flush`, and finally `close`. `close` must be safe to call even
    if `init` failed or never ran.
    """

    name: str

    def describe(self, workspace: int, monitor: str) -> list[str]:
        """Return the commands assigning `workspace` to `monitor`."""
        ...

    async def init(self, *, log: Logger) -> None:
        """Check the preconditions and open the control channel.

        Raises:
            PreconditionError: the environment can't support this backend
            CompositorConnectionError: the control channel can't be opened
        """
        ...

    async def assign_workspace(self, workspace: int, monitor: str, *, log: Logger) -> None:
        """Assign `workspace` to `monitor` (or queue it for `flush`).

        Raises:
            CommandError: the compositor rejected the command
            CompositorConnectionError: the transport failed
        """
        ...

    async def flush(self, *, log: Logger) -> None:
        """Send any queued work."""
        ...

    async def close(self, *, log: Logger) -> None:
        """Release the control channel, if any."""
        ...
