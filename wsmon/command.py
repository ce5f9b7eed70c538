"""wsmon - assign a range of workspaces to a monitor (cli entry point)."""

import argparse
import asyncio
import sys
from typing import NoReturn

import shtab

from .adapters import get_backend
from .constants import SUPPORTED_SHELLS, SUPPORTED_WMS
from .logging_setup import get_logger, init_logger
from .manager import WorkspaceAssigner
from .models import CompositorConnectionError, ExitCode, PreconditionError, UsageError, WsmonError
from .ranges import parse_range

__all__ = ["get_parser", "main", "run"]

EPILOG = """\
Examples:
  %(prog)s --wm=hyprland --name=DP-1 --range=1-5
  %(prog)s --wm=sway --name=DP-1 --range=1-5
"""


class ArgumentParser(argparse.ArgumentParser):
    """Parser exiting with the wsmon usage error code."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.ERROR, f"{self.prog}: error: {message}\n")


def get_parser() -> ArgumentParser:
    """Return the command line parser."""
    parser = ArgumentParser(
        prog="wsmon",
        description="Assign a range of workspaces to a monitor.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--wm", required=True, metavar="{" + ",".join(SUPPORTED_WMS) + "}", help="Window manager type")
    parser.add_argument("--name", required=True, metavar="monitor", help="Monitor name, eg. DP-1")
    parser.add_argument("--range", required=True, metavar="start-end", help="Workspace range, eg. 1-5")
    parser.add_argument("--batch", action="store_true", help="Send every command in a single hyprctl call (hyprland only)")
    parser.add_argument("--dry-run", action="store_true", help="Print commands without executing them")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--debug",
        help="Enable debug mode and log to a file",
        metavar="filename",
    ).complete = shtab.FILE
    shtab.add_argument_to(parser, ["--print-completion"], help=f"Print a shell completion script ({', '.join(SUPPORTED_SHELLS)})")
    return parser


async def run(args: argparse.Namespace) -> list[int]:
    """Run the workspace assignment described by `args`.

    Returns:
        The workspaces which couldn't be assigned
    """
    workspaces = parse_range(args.range)
    backend = get_backend(args.wm, batch=args.batch)
    assigner = WorkspaceAssigner(backend, dry_run=args.dry_run, verbose=args.verbose)
    return await assigner.run(workspaces, args.name)


def main(argv: list[str] | None = None) -> None:
    """Run the command."""
    parser = get_parser()
    args = parser.parse_args(argv)
    empty = [f"--{flag}" for flag in ("wm", "name", "range") if not getattr(args, flag)]
    if empty:
        parser.error(f"empty value for {', '.join(empty)}")

    if args.debug:
        init_logger(filename=args.debug, verbose=args.verbose, force_debug=True)
    else:
        init_logger(verbose=args.verbose)
    log = get_logger("startup")

    try:
        asyncio.run(run(args))
    except UsageError as e:
        parser.print_usage(sys.stderr)
        log.critical("%s", e)
        sys.exit(ExitCode.ERROR)
    except PreconditionError as e:
        log.critical("Cannot use %s: %s", args.wm, e)
        sys.exit(ExitCode.ERROR)
    except CompositorConnectionError as e:
        log.critical("Failed to initialize %s: %s", args.wm, e)
        sys.exit(ExitCode.ERROR)
    except WsmonError as e:
        log.critical("Failed to assign workspaces on %s: %s", args.wm, e)
        sys.exit(ExitCode.ERROR)
    except KeyboardInterrupt:
        sys.exit(ExitCode.ERROR)
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
