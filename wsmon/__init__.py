"""wsmon - pin a range of workspaces to a monitor on Hyprland or Sway.

Talks to the running compositor through its control socket (or its control
program) and binds every workspace of a `start-end` range to one output.
"""
