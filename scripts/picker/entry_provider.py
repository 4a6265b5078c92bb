"""
Concrete implementation of EntryProvider using the taskfile.py loader.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add scripts to path for imports
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from picker.providers import Entry  # noqa: E402
from taskfile import TaskProps, load_tasks  # noqa: E402


def entries_from_tasks(tasks: dict[str, TaskProps]) -> tuple[Entry, ...]:
    """Convert loaded tasks to entries sorted by name."""
    return tuple(
        Entry.from_props(name, tasks[name])
        for name in sorted(tasks)
    )


class TaskfileEntryProvider:
    """EntryProvider implementation that reads a Taskfile."""

    def __init__(self, global_: bool = False, cwd: Path | None = None):
        self._global = global_
        self._cwd = cwd
        self.path: Path | None = None

    def load(self) -> tuple[Entry, ...]:
        """Locate the Taskfile and load its tasks.

        Raises a TaskfileError subclass when the file is missing,
        unreadable, malformed, of another version or empty.
        """
        self.path, tasks = load_tasks(self._global, self._cwd)
        return entries_from_tasks(tasks)
