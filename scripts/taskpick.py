#!/usr/bin/env python3
"""
Task Picker

Interactive list of the tasks in the nearest Taskfile. Move with the arrow
keys, press Enter to run the highlighted task with `task`, q or Esc to quit.

Usage:
    taskpick.py              Pick a task from ./Taskfile.yml
    taskpick.py --global     Pick a task from ~/Taskfile.yml (runs with -g)
    taskpick.py --list       Print tasks and exit (no TUI)
    taskpick.py --no-exec    Print the picked task name instead of running it

Requirements:
    pip install textual pyyaml
"""

import argparse
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402

from launcher import LaunchError, launch  # noqa: E402
from picker.app import run_picker  # noqa: E402
from picker.entry_provider import TaskfileEntryProvider  # noqa: E402
from picker.hooks import install_hooks  # noqa: E402
from picker.loop import DEFAULT_TICK_RATE, TerminalIOError  # noqa: E402
from picker.providers import Entry  # noqa: E402
from taskfile import TaskfileError  # noqa: E402

logger = logging.getLogger("taskpick")


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through Rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def tick_rate_ms(value: str) -> float:
    """Parse a positive millisecond count into seconds."""
    try:
        ms = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number of milliseconds: {value!r}") from None
    if ms <= 0:
        raise argparse.ArgumentTypeError("tick rate must be greater than 0")
    return ms / 1000


def print_tasks(entries: tuple[Entry, ...], path: Path | None) -> int:
    """Print task names and descriptions and exit."""
    if path is not None:
        print(f"{path}:")
    width = max(len(entry.name) for entry in entries)
    for entry in entries:
        print(f"  {entry.name:<{width}}  {entry.description_text()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pick and run a task from a Taskfile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-g",
        "--global",
        dest="global_",
        action="store_true",
        help="Use the Taskfile in the home directory and run tasks with -g",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print tasks and exit (no TUI)",
    )
    parser.add_argument(
        "--no-exec",
        action="store_true",
        help="Print the picked task name instead of running it",
    )
    parser.add_argument(
        "--tick-rate",
        type=tick_rate_ms,
        default=DEFAULT_TICK_RATE,
        metavar="MS",
        help=f"Input poll interval in milliseconds (default: {int(DEFAULT_TICK_RATE * 1000)})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Load the Taskfile, run the picker and act on the outcome."""
    provider = TaskfileEntryProvider(global_=args.global_)
    try:
        entries = provider.load()
    except TaskfileError as e:
        logger.error("%s", e)
        return 1

    if args.list:
        return print_tasks(entries, provider.path)

    try:
        outcome = run_picker(
            entries,
            tick_rate=args.tick_rate,
            source=str(provider.path) if provider.path else None,
        )
    except TerminalIOError as e:
        logger.error("%s", e)
        return 1

    if not outcome.is_confirmed:
        return 0

    if args.no_exec:
        print(outcome.entry_name)
        return 0

    try:
        launch(outcome.entry_name, args.global_)
    except LaunchError as e:
        logger.error("%s", e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Left in place when an exception escapes main
    uninstall_hooks = install_hooks()
    status = run(args)
    uninstall_hooks()
    return status


if __name__ == "__main__":
    sys.exit(main())
