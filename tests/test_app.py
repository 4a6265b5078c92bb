"""Tests for picker/app.py - the Textual surface and input adapters."""

import asyncio
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from picker.app import KeyQueue, ScreenSurface, TaskPickerApp, run_picker
from picker.loop import TerminalIOError
from picker.providers import Entry, KeyEvent, KeyKind, Outcome, SelectionView
from picker.views.widgets import EntryRow

ENTRIES = (Entry.from_props("build", {"desc": "Builds it"}), Entry("test"))


class TestKeyQueue:
    """Tests for the queued input source."""

    def test_empty_poll_times_out(self) -> None:
        assert KeyQueue().poll(0.01) is None

    def test_returns_events_in_order(self) -> None:
        keys = KeyQueue()
        keys.put(KeyEvent("down"))
        keys.put(KeyEvent("enter"))

        assert keys.poll(0.01) == KeyEvent("down", KeyKind.PRESS)
        assert keys.poll(0.01) == KeyEvent("enter", KeyKind.PRESS)
        assert keys.poll(0.01) is None

    def test_cancelled_reports_escape(self) -> None:
        keys = KeyQueue()
        keys.put(KeyEvent("down"))
        keys.cancelled = lambda: True

        assert keys.poll(0.01) == KeyEvent("escape")


class TestScreenSurface:
    """Tests for the display adapter."""

    def test_render_goes_through_ui_thread(self) -> None:
        shown: list[SelectionView] = []

        class FakeApp:
            def call_from_thread(self, callback, *args):
                shown.append("ui-thread")
                return callback(*args)

            def show_view(self, view: SelectionView) -> None:
                shown.append(view)

        view = SelectionView(("build",), 0, "Builds it", "Summary is empty.")
        ScreenSurface(FakeApp()).render(view)

        assert shown == ["ui-thread", view]


class TestRunPicker:
    """Tests for run_picker outcome and error handling."""

    def test_returns_outcome(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TaskPickerApp, "run", lambda self: Outcome.confirmed("test"))

        assert run_picker(ENTRIES) == Outcome.confirmed("test")

    def test_no_result_is_quit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TaskPickerApp, "run", lambda self: None)

        assert run_picker(ENTRIES) == Outcome.quit()

    def test_loop_error_is_raised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = TerminalIOError("Could not draw the task list")

        def failing_run(self):
            self.loop_error = error
            return None

        monkeypatch.setattr(TaskPickerApp, "run", failing_run)

        with pytest.raises(TerminalIOError) as exc_info:
            run_picker(ENTRIES)
        assert exc_info.value is error

    def test_abnormal_return_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TaskPickerApp, "run", lambda self: None)
        monkeypatch.setattr(TaskPickerApp, "return_code", property(lambda self: 1))

        with pytest.raises(TerminalIOError):
            run_picker(ENTRIES)

    def test_source_becomes_sub_title(self) -> None:
        app = TaskPickerApp(ENTRIES, source="/work/Taskfile.yml")
        assert app.sub_title == "/work/Taskfile.yml"


def drive_app(keys: tuple[str, ...], entries: tuple[Entry, ...] = ENTRIES) -> TaskPickerApp:
    """Run the app headless, press ``keys`` and wait for the selection loop to finish."""
    app = TaskPickerApp(entries, tick_rate=0.01)

    async def session() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*keys)
            await app.workers.wait_for_complete()

    asyncio.run(session())
    return app


class TestPickerSession:
    """Tests that run TaskPickerApp end to end with Textual's pilot."""

    def test_down_then_enter_confirms_second_task(self) -> None:
        app = drive_app(("down", "enter"))

        assert app.return_value == Outcome.confirmed("test")
        assert app.loop_error is None

    def test_down_wraps_to_first_task(self) -> None:
        app = drive_app(("down", "down", "enter"))

        assert app.return_value == Outcome.confirmed("build")

    def test_up_wraps_to_last_task(self) -> None:
        app = drive_app(("up", "enter"))

        assert app.return_value == Outcome.confirmed("test")

    @pytest.mark.parametrize("key", ["escape", "q", "ctrl+q"])
    def test_quit_keys(self, key: str) -> None:
        app = drive_app((key,))

        assert app.return_value == Outcome.quit()
        assert app.loop_error is None

    def test_selected_class_follows_cursor(self) -> None:
        highlighted: list[list[bool]] = []
        app = TaskPickerApp(ENTRIES, tick_rate=0.01)

        def selected_rows() -> list[bool]:
            return [row.has_class("selected") for row in app.screen.query(EntryRow)]

        async def session() -> None:
            async with app.run_test() as pilot:
                await pilot.pause(0.1)
                highlighted.append(selected_rows())
                await pilot.press("down")
                await pilot.pause(0.1)
                highlighted.append(selected_rows())
                await pilot.press("escape")
                await app.workers.wait_for_complete()

        asyncio.run(session())

        assert highlighted == [[True, False], [False, True]]
        assert app.return_value == Outcome.quit()
