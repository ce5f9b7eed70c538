"""IPC path management."""

import os

from .constants import HYPRLAND_SIGNATURE_VAR
from .models import PreconditionError

__all__ = [
    "get_hyprland_signature",
    "get_hyprland_socket",
]


def get_hyprland_signature() -> str:
    """Return the running Hyprland instance signature.

    Raises:
        PreconditionError: Hyprland isn't running in this session
    """
    signature = os.environ.get(HYPRLAND_SIGNATURE_VAR)
    if not signature:
        msg = f"{HYPRLAND_SIGNATURE_VAR} not set - are you running Hyprland?"
        raise PreconditionError(msg)
    return signature


def get_hyprland_socket(signature: str | None = None, uid: int | None = None) -> str:
    """Return the path of the Hyprland command socket.

    Args:
        signature: instance signature (read from the environment if not set)
        uid: numeric user id (current user if not set)
    """
    if signature is None:
        signature = get_hyprland_signature()
    if uid is None:
        uid = os.getuid()
    return f"/run/user/{uid}/hypr/{signature}/.socket.sock"
