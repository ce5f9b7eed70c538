"""Common types and errors."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = [
    "CommandError",
    "CompositorConnectionError",
    "ExitCode",
    "FormatError",
    "PreconditionError",
    "RunState",
    "UsageError",
    "WorkspaceRange",
    "WsmonError",
]


@dataclass(frozen=True)
class WorkspaceRange:
    """An inclusive range of workspace numbers."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    @property
    def size(self) -> int:
        """Number of workspaces covered (0 for a reversed range)."""
        return len(range(self.start, self.end + 1))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class RunState(Enum):
    """Lifecycle of a workspace assignment run."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    DONE = "done"


class ExitCode(IntEnum):
    """Exit codes for the wsmon command."""

    SUCCESS = 0
    ERROR = 1  # usage error or any fatal failure


class WsmonError(Exception):
    """Base class for the errors raised by wsmon."""


class UsageError(WsmonError):
    """Bad or missing command line arguments."""


class FormatError(UsageError):
    """A workspace range is not written as `start-end`."""


class PreconditionError(WsmonError):
    """The environment can't support the requested backend."""


class CompositorConnectionError(WsmonError):
    """The compositor control channel can't be reached."""


class CommandError(WsmonError):
    """The compositor (or its control program) rejected a command."""
