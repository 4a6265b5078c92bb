"""
Taskfile Loader

Finds the Taskfile for the current directory (or the home directory for
global tasks), checks its version and extracts each task's description
and summary. Nothing else in the file is interpreted.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Candidate file names in order of priority
TASKFILE_NAMES = (
    "Taskfile.yml",
    "taskfile.yml",
    "Taskfile.yaml",
    "taskfile.yaml",
    "Taskfile.dist.yml",
    "taskfile.dist.yml",
    "Taskfile.dist.yaml",
    "taskfile.dist.yaml",
)

# Only schema version understood
TASKFILE_VERSION = "3"

# Task properties read from each task block
TASK_PROPS = ("desc", "summary")

TaskProps = dict[str, Any]


class TaskfileError(Exception):
    """Base class for Taskfile loading failures."""


class TaskfileNotFoundError(TaskfileError):
    """None of the candidate files exist."""


class UnreadableTaskfileError(TaskfileError):
    """The file exists but could not be read."""


class TaskfileParseError(TaskfileError):
    """The content is not YAML of the expected shape."""


class UnsupportedVersionError(TaskfileError):
    """The version field is not the supported one."""


class NoTasksFoundError(TaskfileError):
    """The file declares no tasks."""


class HomeDirUnavailableError(TaskfileError):
    """Global lookup was requested but the home directory is unknown."""


def resolve_search_dir(global_: bool = False, cwd: Path | None = None) -> Path:
    """Directory to search: home for global tasks, else the working directory."""
    if not global_:
        return cwd if cwd is not None else Path.cwd()
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirUnavailableError("Could not find home path.") from e


def find_taskfile(directory: Path, names: tuple[str, ...] = TASKFILE_NAMES) -> Path:
    """First candidate in ``directory`` that is a regular file."""
    for name in names:
        path = directory / name
        if path.is_file():
            logger.debug("Using Taskfile %s", path)
            return path
    raise TaskfileNotFoundError(
        f"Could not find Taskfile in {directory} (tried: {', '.join(names)})"
    )


def _version_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    # Unquoted `version: 3` parses as an int
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _task_props(body: Any) -> TaskProps:
    """Pick the known properties out of a task body.

    Shorthand bodies (a command string or a list of commands) and empty
    bodies carry no properties.
    """
    if not isinstance(body, dict):
        return {}
    return {key: body[key] for key in TASK_PROPS if key in body}


def parse_taskfile(text: str, source: str = "<string>") -> dict[str, TaskProps]:
    """Parse Taskfile content into ``{task name: properties}``."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise TaskfileParseError(f"Could not parse Taskfile {source}: {e}") from e

    if not isinstance(data, dict):
        raise TaskfileParseError(f"Could not parse Taskfile {source}: top level is not a mapping")

    version = _version_string(data.get("version"))
    if version != TASKFILE_VERSION:
        raise UnsupportedVersionError(
            f"Unsupported Taskfile version {data.get('version')!r} in {source}. "
            f"Supported version is {TASKFILE_VERSION}"
        )

    raw_tasks = data.get("tasks")
    if raw_tasks is None:
        raw_tasks = {}
    if not isinstance(raw_tasks, dict):
        raise TaskfileParseError(f"Could not parse Taskfile {source}: 'tasks' is not a mapping")

    tasks: dict[str, TaskProps] = {}
    for name, body in raw_tasks.items():
        tasks[str(name)] = _task_props(body)

    if not tasks:
        raise NoTasksFoundError(f"No tasks found in {source}")

    logger.debug("Loaded %d task(s) from %s", len(tasks), source)
    return tasks


def load_taskfile(path: Path) -> dict[str, TaskProps]:
    """Read and parse one Taskfile."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableTaskfileError(f"Could not read found Taskfile {path}: {e}") from e
    return parse_taskfile(text, source=str(path))


def load_tasks(global_: bool = False, cwd: Path | None = None) -> tuple[Path, dict[str, TaskProps]]:
    """Locate and load the Taskfile. Returns its path and its tasks."""
    directory = resolve_search_dir(global_, cwd)
    path = find_taskfile(directory)
    return path, load_taskfile(path)
