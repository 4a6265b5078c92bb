"""
Task Picker TUI Application.

Main entry point for the terminal user interface. The selection loop runs
in a thread worker; the app is its display surface (frames are applied on
the UI thread before the loop polls again) and its input source (key
presses are queued by ``on_key``).
"""

from __future__ import annotations

import logging
import queue
import sys
from pathlib import Path
from typing import Callable

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual import events, work  # noqa: E402
from textual.app import App  # noqa: E402
from textual.screen import Screen  # noqa: E402
from textual.worker import get_current_worker  # noqa: E402

from picker.loop import DEFAULT_TICK_RATE, TerminalIOError, run_loop  # noqa: E402
from picker.providers import Entry, KeyEvent, KeyKind, Outcome, SelectionView  # noqa: E402
from picker.selection import SelectionModel  # noqa: E402
from picker.views.task_list import TaskListScreen  # noqa: E402

logger = logging.getLogger(__name__)


class ScreenSurface:
    """DisplaySurface that draws on the app's TaskListScreen."""

    def __init__(self, app: TaskPickerApp) -> None:
        self._app = app

    def render(self, view: SelectionView) -> None:
        # Blocks until the UI thread has applied the frame
        self._app.call_from_thread(self._app.show_view, view)


class KeyQueue:
    """InputSource fed by Textual key events.

    Once ``cancelled`` reports True, every poll returns an escape press so
    the loop ends within one tick.
    """

    def __init__(self) -> None:
        self._events: queue.Queue[KeyEvent] = queue.Queue()
        self.cancelled: Callable[[], bool] = lambda: False

    def put(self, event: KeyEvent) -> None:
        self._events.put(event)

    def poll(self, timeout: float) -> KeyEvent | None:
        if self.cancelled():
            return KeyEvent("escape")
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None


class TaskPickerApp(App[Outcome]):
    """Pick a task from a Taskfile."""

    TITLE = "Task Picker"
    SUB_TITLE = "Taskfile"

    ENABLE_COMMAND_PALETTE = False
    AUTO_FOCUS = None

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        entries: tuple[Entry, ...],
        tick_rate: float = DEFAULT_TICK_RATE,
        source: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._model = SelectionModel(entries)
        self._tick_rate = tick_rate
        self._keys = KeyQueue()
        self._list_screen: TaskListScreen | None = None
        self.loop_error: TerminalIOError | None = None
        if source:
            self.sub_title = source

    def get_default_screen(self) -> Screen:
        self._list_screen = TaskListScreen(self._model.names)
        return self._list_screen

    def on_ready(self) -> None:
        """Start the selection loop once the screen is drawn."""
        self._drive()

    def on_key(self, event: events.Key) -> None:
        # Textual only reports presses
        self._keys.put(KeyEvent(event.key, KeyKind.PRESS))

    def action_quit(self) -> None:
        """Route Ctrl+Q through the loop so it ends like a quit key."""
        self._keys.put(KeyEvent("escape"))

    def show_view(self, view: SelectionView) -> None:
        if self._list_screen is None:
            raise RuntimeError("Task list screen is not mounted")
        self._list_screen.show(view)

    @work(thread=True, exclusive=True, name="selection-loop")
    def _drive(self) -> None:
        worker = get_current_worker()
        self._keys.cancelled = lambda: worker.is_cancelled

        try:
            outcome = run_loop(self._model, ScreenSurface(self), self._keys, self._tick_rate)
        except TerminalIOError as e:
            self.loop_error = e
            if not worker.is_cancelled:
                self.call_from_thread(self.exit, None, 1)
            return

        if not worker.is_cancelled:
            self.call_from_thread(self.exit, outcome)


def run_picker(
    entries: tuple[Entry, ...],
    tick_rate: float = DEFAULT_TICK_RATE,
    source: str | None = None,
) -> Outcome:
    """Run the TUI application and return how the session ended."""
    app = TaskPickerApp(entries, tick_rate=tick_rate, source=source)
    outcome = app.run()

    if app.loop_error is not None:
        raise app.loop_error
    if app.return_code:
        raise TerminalIOError(f"Terminal session ended with status {app.return_code}")
    if outcome is None:
        return Outcome.quit()
    logger.debug("Picker returned %s", outcome)
    return outcome
