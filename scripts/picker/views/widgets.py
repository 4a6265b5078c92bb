"""Reusable widgets for the task picker."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, Static


class EntryRow(Static):
    """Single row in the task list."""

    DEFAULT_CSS = """
    EntryRow {
        height: 1;
        width: 100%;
    }

    EntryRow.selected {
        background: $success;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, entry_name: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entry_name = entry_name

    def compose(self) -> ComposeResult:
        # Task names are plain text, never markup
        yield Label(Text(self._entry_name))


class EntryRows(VerticalScroll):
    """Scrolling body of the task list.

    Not focusable, so arrow keys reach the app instead of scrolling.
    """

    can_focus = False


class TaskListPanel(Static):
    """Bordered list of task names with one highlighted row."""

    DEFAULT_CSS = """
    TaskListPanel {
        height: 100%;
        border: solid $primary;
        padding: 0 1;
    }

    TaskListPanel .title {
        text-style: bold;
        margin-bottom: 1;
    }

    TaskListPanel EntryRows {
        height: 1fr;
    }
    """

    def __init__(self, names: tuple[str, ...], title: str = "Tasks", **kwargs) -> None:
        super().__init__(**kwargs)
        self._names = names
        self._title = title
        self._highlighted: int | None = None

    def compose(self) -> ComposeResult:
        yield Label(Text(self._title), classes="title")
        with EntryRows():
            for name in self._names:
                yield EntryRow(name)

    def highlight(self, index: int | None) -> None:
        """Mark row ``index`` as selected and bring it into view."""
        if index == self._highlighted:
            return
        rows = list(self.query(EntryRow))
        for i, row in enumerate(rows):
            row.set_class(i == index, "selected")
        if index is not None and 0 <= index < len(rows):
            rows[index].scroll_visible()
        self._highlighted = index


class TextPanel(Static):
    """Titled panel with a single block of text."""

    DEFAULT_CSS = """
    TextPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    TextPanel .title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    PANEL_TITLE = ""

    def compose(self) -> ComposeResult:
        yield Label(Text(self.PANEL_TITLE), classes="title")
        yield Static(Text(""), classes="body")

    def set_text(self, text: str) -> None:
        self.query_one(".body", Static).update(Text(text))


class DescriptionPanel(TextPanel):
    """Panel showing the selected task's description."""

    PANEL_TITLE = "Description"


class SummaryPanel(TextPanel):
    """Panel showing the selected task's summary."""

    PANEL_TITLE = "Summary"
