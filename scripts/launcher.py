"""
Task Launcher

Runs a task picked in the TUI through the `task` runner in a shell.
"""

import logging
import re
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

TASK_RUNNER = "task"


class LaunchError(RuntimeError):
    """The task runner could not be started."""


def default_shell() -> list[str]:
    """Shell prefix for the current platform."""
    if sys.platform == "win32":
        return ["nu", "--commands"]
    return ["sh", "-c"]


def nu_quote(value: str) -> str:
    """Quote ``value`` as a single Nushell word."""
    if value and re.fullmatch(r"[\w@%+=:,./-]+", value):
        return value
    if "'" not in value:
        return f"'{value}'"
    # Raw string r#'...'#, with enough hashes to not close early
    hashes = "#"
    while f"'{hashes}" in value:
        hashes += "#"
    return f"r{hashes}'{value}'{hashes}"


def build_command(name: str, global_: bool = False, shell: list[str] | None = None) -> list[str]:
    """Command line that runs task ``name``, with ``-g`` for global tasks.

    The name is quoted for the shell that runs the line.
    """
    shell = shell or default_shell()
    quote = nu_quote if Path(shell[0]).stem == "nu" else shlex.quote
    line = f"{TASK_RUNNER} {quote(name)}"
    if global_:
        line += " -g"
    return [*shell, line]


def launch(
    name: str,
    global_: bool = False,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> int:
    """Run the task and return the runner's exit status."""
    command = build_command(name, global_)
    logger.info("Running: %s", " ".join(command))
    try:
        result = runner(command, check=False)
    except OSError as e:
        raise LaunchError(f"Could not start '{command[0]}': {e}") from e
    if result.returncode != 0:
        logger.warning("Task '%s' exited with status %d", name, result.returncode)
    return result.returncode
