"""Command-line front door for niriglue.

Parses the command, connects to niri and dispatches into the Launcher.
"""

import argparse
import sys

from .adapters.niri.client import NiriClient
from .direction import Direction
from .errors import NiriGlueError
from .launcher import Launcher
from .telemetry import configure_logging, get_logger

logger = get_logger(__name__)


def _add_direction_command(parent: argparse._SubParsersAction, name: str, help_text: str) -> None:
    parser = parent.add_parser(name, help=help_text)
    parser.add_argument("direction", type=Direction, choices=list(Direction), metavar="{up,down,left,right}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="niriglue",
        description="Glue between niri and the editors running in it.",
    )
    parser.add_argument("-p", "--path", help="path to niri socket (default: $NIRI_SOCKET)")
    parser.add_argument("-w", "--window", type=int, help="niri window id to act on (default: focused)")
    parser.add_argument(
        "-f", "--fresh", action="store_true",
        help="ignore the focused window and launch with defaults",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("test", help="check that niri is reachable")
    commands.add_parser("env", help="print the environment a new window would inherit")
    commands.add_parser("kitty", help="focus a kitty open in the same directory or start one")

    vim = commands.add_parser("vim", help="editor commands")
    vim.add_argument(
        "action", nargs="?", default="run", choices=["run", "sync", "shift"],
        help="run: new editor; sync: fit width to columns; shift: keep focus visible",
    )

    _add_direction_command(commands, "switch", "focus a pane or niri window in a direction")
    _add_direction_command(commands, "move", "move a pane or niri window in a direction")
    commands.add_parser("close", help="close the focused pane or niri window")
    return parser


def run(args: argparse.Namespace) -> None:
    with NiriClient(socket_path=args.path) as niri:
        launcher = Launcher(niri, window_id=args.window, fresh=args.fresh)
        if args.command == "test":
            launcher.test()
            return

        data = launcher.get_launching_data()
        if args.command == "env":
            launcher.print_env(data)
        elif args.command == "kitty":
            launcher.run_kitty(data)
        elif args.command == "vim":
            if args.action == "run":
                launcher.run_editor(data)
            elif args.action == "sync":
                launcher.sync_editor(data)
            else:
                launcher.shift_editor(data)
        elif args.command == "switch":
            launcher.switch(data, args.direction)
        elif args.command == "move":
            launcher.move_window(data, args.direction)
        elif args.command == "close":
            launcher.close(data)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    try:
        run(args)
    except NiriGlueError as e:
        logger.error(f"[CLI] {args.command}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
