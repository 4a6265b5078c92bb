"""Main picker screen: task list on the left, description and summary on the right."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Label

from picker.providers import SelectionView
from picker.views.widgets import DescriptionPanel, SummaryPanel, TaskListPanel


class TaskListScreen(Screen):
    """Projection of a SelectionView. Never changes the selection itself."""

    DEFAULT_CSS = """
    TaskListScreen #columns {
        height: 1fr;
    }

    TaskListScreen #left-column {
        width: 1fr;
        padding: 0 1;
    }

    TaskListScreen #right-column {
        width: 1fr;
        padding: 0 1;
    }

    TaskListScreen #hints {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }
    """

    def __init__(self, names: tuple[str, ...], title: str = "Tasks", **kwargs) -> None:
        super().__init__(**kwargs)
        self._names = names
        self._title = title
        self._shown: SelectionView | None = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="columns"):
            with Vertical(id="left-column"):
                yield TaskListPanel(self._names, self._title)

            with Vertical(id="right-column"):
                yield DescriptionPanel()
                yield SummaryPanel()

        yield Label("", id="hints")
        yield Footer()

    def show(self, view: SelectionView) -> None:
        """Draw ``view``. Repeated frames with the same view are skipped."""
        if view == self._shown:
            return
        self.query_one(TaskListPanel).highlight(view.selected)
        self.query_one(DescriptionPanel).set_text(view.description)
        self.query_one(SummaryPanel).set_text(view.summary)
        self.query_one("#hints", Label).update(Text("   ".join(view.hints)))
        self._shown = view
