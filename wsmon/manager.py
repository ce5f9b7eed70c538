"""Workspace assignment runner."""

from logging import Logger

from .adapters import WorkspaceBackend
from .logging_setup import get_logger
from .models import CommandError, CompositorConnectionError, RunState, WorkspaceRange

__all__ = ["WorkspaceAssigner"]


class WorkspaceAssigner:
    """Assign a range of workspaces to one monitor through a backend.

    The backend is initialized once, used for every workspace of the range
    and always closed at the end of `run`, whatever happened.
    """

    def __init__(self, backend: WorkspaceBackend, dry_run: bool = False, verbose: bool = False, log: Logger | None = None) -> None:
        self.backend = backend
        self.dry_run = dry_run
        self.verbose = verbose
        self.log = log or get_logger("assigner")
        self.state = RunState.UNINITIALIZED

    async def run(self, workspaces: WorkspaceRange, monitor: str) -> list[int]:
        """Assign every workspace of `workspaces` to `monitor`.

        Per workspace failures are logged and don't stop the run.

        Returns:
            The workspaces which couldn't be assigned

        Raises:
            PreconditionError, CompositorConnectionError: the backend failed to initialize
            CommandError: a batched backend failed to send its commands
        """
        try:
            await self.backend.init(log=self.log)
            self.state = RunState.INITIALIZED
            self.log.debug("Assigning workspaces %s to monitor %s", workspaces, monitor)
            failures = await self._process(workspaces, monitor)
            self.state = RunState.DONE
            if self.verbose:
                self.log.info("Successfully configured %d workspaces", workspaces.size)
            return failures
        finally:
            await self.backend.close(log=self.log)

    async def _process(self, workspaces: WorkspaceRange, monitor: str) -> list[int]:
        self.state = RunState.RUNNING
        failures: list[int] = []
        for workspace in workspaces:
            if self.dry_run:
                print(f"Would assign workspace {workspace} to monitor {monitor}")
                if self.verbose:
                    for command in self.backend.describe(workspace, monitor):
                        self.log.info("  %s", command)
                continue

            if self.verbose:
                self.log.info("Assigning workspace %d to monitor %s", workspace, monitor)

            try:
                await self.backend.assign_workspace(workspace, monitor, log=self.log)
            except (CommandError, CompositorConnectionError) as e:
                self.log.error("Error assigning workspace %d: %s", workspace, e)  # noqa: TRY400
                failures.append(workspace)

        if not self.dry_run:
            await self.backend.flush(log=self.log)
        return failures
