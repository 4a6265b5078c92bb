"""
Data types and protocols for the task picker.

Protocols define the interface; implementations can be swapped
for testing or alternative terminals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

DESCRIPTION_EMPTY = "Description is empty."
SUMMARY_EMPTY = "Summary is empty."
NOT_A_STRING = "Not a string."
ITEM_NOT_FOUND = "Item not found."


def _as_text(present: bool, value: Any, empty: str) -> str:
    if not present:
        return empty
    if isinstance(value, str):
        return value
    return NOT_A_STRING


@dataclass(frozen=True)
class Entry:
    """Immutable snapshot of one task definition."""

    name: str
    desc: Any = None
    summary: Any = None
    has_desc: bool = False
    has_summary: bool = False

    @classmethod
    def from_props(cls, name: str, props: dict[str, Any]) -> "Entry":
        """Build an entry from a task's property block."""
        return cls(
            name=name,
            desc=props.get("desc"),
            summary=props.get("summary"),
            has_desc="desc" in props,
            has_summary="summary" in props,
        )

    def description_text(self) -> str:
        return _as_text(self.has_desc, self.desc, DESCRIPTION_EMPTY)

    def summary_text(self) -> str:
        return _as_text(self.has_summary, self.summary, SUMMARY_EMPTY)


class KeyKind(str, Enum):
    """Transition reported by the input source for a key."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A single key event, named the way Textual names keys."""

    code: str
    kind: KeyKind = KeyKind.PRESS


class OutcomeKind(str, Enum):
    QUIT = "quit"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Outcome:
    """Terminal result of an interactive session."""

    kind: OutcomeKind
    entry_name: str | None = None

    @classmethod
    def quit(cls) -> "Outcome":
        return cls(OutcomeKind.QUIT)

    @classmethod
    def confirmed(cls, entry_name: str) -> "Outcome":
        return cls(OutcomeKind.CONFIRMED, entry_name)

    @property
    def is_confirmed(self) -> bool:
        return self.kind is OutcomeKind.CONFIRMED


@dataclass(frozen=True)
class SelectionView:
    """What one frame shows: the list, the highlight and both text panels."""

    names: tuple[str, ...]
    selected: int | None
    description: str
    summary: str
    hints: tuple[str, ...] = ("↑/↓ move", "enter select", "q/esc quit")


class DisplaySurface(Protocol):
    """Protocol for anything that can draw a frame."""

    def render(self, view: SelectionView) -> None:
        """Draw the view. Must not keep a reference for mutation."""
        ...


class InputSource(Protocol):
    """Protocol for reading key events."""

    def poll(self, timeout: float) -> KeyEvent | None:
        """Wait at most ``timeout`` seconds for one key event."""
        ...


class EntryProvider(Protocol):
    """Protocol for loading the entries shown in the list."""

    def load(self) -> tuple[Entry, ...]:
        """Load the sorted, non-empty entry collection."""
        ...
