"""Cyclic selection over a fixed, ordered collection of entries."""

from __future__ import annotations

from picker.providers import ITEM_NOT_FOUND, Entry, SelectionView


class SelectionModel:
    """Ordered entries plus a single cursor that wraps at both ends.

    The cursor is ``None`` until the first ``select_*`` call and a valid
    index afterwards. Only the select methods move it; views read it.
    """

    def __init__(self, entries: tuple[Entry, ...] | list[Entry]) -> None:
        self._entries = tuple(entries)
        self._selected: int | None = None

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    @property
    def selected(self) -> int | None:
        return self._selected

    def select_first(self) -> None:
        if not self._entries:
            raise ValueError("Cannot select from an empty collection")
        self._selected = 0

    def select_next(self) -> None:
        if self._selected is None or self._selected >= len(self._entries) - 1:
            self.select_first()
        else:
            self._selected += 1

    def select_prev(self) -> None:
        if self._selected is None:
            self.select_first()
        elif self._selected == 0:
            self._selected = len(self._entries) - 1
        else:
            self._selected -= 1

    def current(self) -> Entry | None:
        """Entry under the cursor, or None when nothing is selected."""
        if self._selected is None or not 0 <= self._selected < len(self._entries):
            return None
        return self._entries[self._selected]

    def current_name(self) -> str | None:
        entry = self.current()
        return entry.name if entry else None

    def description(self) -> str:
        entry = self.current()
        if entry is None:
            return ITEM_NOT_FOUND
        return entry.description_text()

    def summary(self) -> str:
        entry = self.current()
        if entry is None:
            return ITEM_NOT_FOUND
        return entry.summary_text()

    def view(self) -> SelectionView:
        """Snapshot of the current state for rendering."""
        return SelectionView(
            names=self.names,
            selected=self._selected,
            description=self.description(),
            summary=self.summary(),
        )
