"""
Render/poll/dispatch loop driving a SelectionModel.

The loop is terminal-agnostic: it draws through a DisplaySurface and
reads keys from an InputSource, so tests can drive it with fakes.
"""

from __future__ import annotations

import logging

from picker.providers import (
    DisplaySurface,
    InputSource,
    KeyEvent,
    KeyKind,
    Outcome,
)
from picker.selection import SelectionModel

logger = logging.getLogger(__name__)

# Seconds to wait for a key before redrawing
DEFAULT_TICK_RATE = 0.25

QUIT_KEYS = frozenset({"q", "escape"})
NEXT_KEYS = frozenset({"down"})
PREV_KEYS = frozenset({"up"})
CONFIRM_KEYS = frozenset({"enter"})


class TerminalIOError(RuntimeError):
    """Drawing to or reading from the terminal failed."""


def dispatch(model: SelectionModel, event: KeyEvent) -> Outcome | None:
    """Apply one key event to the model.

    Returns the session outcome when the key ends the session, else None.
    Only presses count; repeats and releases are ignored.
    """
    if event.kind is not KeyKind.PRESS:
        return None

    code = event.code
    if code in QUIT_KEYS:
        return Outcome.quit()
    if code in NEXT_KEYS:
        model.select_next()
    elif code in PREV_KEYS:
        model.select_prev()
    elif code in CONFIRM_KEYS:
        name = model.current_name()
        if name is not None:
            return Outcome.confirmed(name)
    return None


def run_loop(
    model: SelectionModel,
    surface: DisplaySurface,
    source: InputSource,
    tick_rate: float = DEFAULT_TICK_RATE,
) -> Outcome:
    """Run until a quit or confirm key arrives.

    Failures from ``surface.render`` or ``source.poll`` are raised as
    TerminalIOError without retrying.
    """
    if tick_rate <= 0:
        raise ValueError(f"tick_rate must be positive, got {tick_rate}")

    model.select_first()

    while True:
        try:
            surface.render(model.view())
        except Exception as e:
            raise TerminalIOError(f"Could not draw the task list: {e}") from e

        try:
            event = source.poll(tick_rate)
        except Exception as e:
            raise TerminalIOError(f"Could not read terminal input: {e}") from e

        if event is None:
            continue

        outcome = dispatch(model, event)
        if outcome is not None:
            logger.debug("Session ended: %s %s", outcome.kind.value, outcome.entry_name or "")
            return outcome
