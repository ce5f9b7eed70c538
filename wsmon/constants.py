"""Shared constants for wsmon."""

__all__ = [
    "HYPRCTL_EXECUTABLE",
    "HYPRLAND_SIGNATURE_VAR",
    "SUPPORTED_SHELLS",
    "SUPPORTED_WMS",
    "VERBOSE_LOG_FORMAT",
    "VERBOSE_TIME_FORMAT",
]

HYPRLAND_SIGNATURE_VAR = "HYPRLAND_INSTANCE_SIGNATURE"

HYPRCTL_EXECUTABLE = "hyprctl"

SUPPORTED_WMS = ("hyprland", "sway")

# Supported shells for completion generation
SUPPORTED_SHELLS = ("bash", "zsh", "tcsh")

# Verbose mode prefixes lines with a wall clock time, down to the microsecond
VERBOSE_LOG_FORMAT = r"%(asctime)s %(message)s"
VERBOSE_TIME_FORMAT = "%H:%M:%S.%f"
