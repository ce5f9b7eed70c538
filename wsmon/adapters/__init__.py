"""Compositor backends.

Each backend implements the `WorkspaceBackend` protocol: a Hyprland one
writing to the control socket, a Hyprland one going through a single
`hyprctl --batch` call, and a Sway one using i3ipc.
"""

from ..models import PreconditionError
from .backend import WorkspaceBackend
from .hyprctl import HyprctlBatchBackend
from .hyprland import HyprlandSocketBackend
from .sway import SwayBackend

__all__ = [
    "HyprctlBatchBackend",
    "HyprlandSocketBackend",
    "SwayBackend",
    "WorkspaceBackend",
    "get_backend",
]

BACKENDS: dict[str, type[WorkspaceBackend]] = {
    "hyprland": HyprlandSocketBackend,
    "sway": SwayBackend,
}

BATCH_BACKENDS: dict[str, type[WorkspaceBackend]] = {
    "hyprland": HyprctlBatchBackend,
}


def get_backend(wm: str, batch: bool = False) -> WorkspaceBackend:
    """Return a backend instance for the window manager `wm`.

    Args:
        wm: window manager name, case insensitive
        batch: if True, pick the backend sending everything in one call

    Raises:
        PreconditionError: `wm` is unknown, or has no batch backend
    """
    key = wm.lower()
    if key not in BACKENDS:
        msg = f"Unsupported window manager: {wm}"
        raise PreconditionError(msg)
    if batch:
        if key not in BATCH_BACKENDS:
            msg = f"Batch mode is not available for {wm}"
            raise PreconditionError(msg)
        return BATCH_BACKENDS[key]()
    return BACKENDS[key]()
