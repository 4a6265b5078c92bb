"""
Terminal restoration on abnormal exit.

Textual restores the terminal when App.run() returns or raises. The hook
here covers the rest: an uncaught exception anywhere in the process puts
the terminal back into cooked mode on the primary screen before the
traceback is printed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

logger = logging.getLogger(__name__)

LEAVE_ALT_SCREEN = "\x1b[?1049l"
SHOW_CURSOR = "\x1b[?25h"

_saved_tty: list[Any] | None = None


def snapshot_terminal() -> None:
    """Remember the tty attributes so they can be put back later."""
    global _saved_tty
    if sys.platform == "win32" or not sys.stdin.isatty():
        return
    import termios

    try:
        _saved_tty = termios.tcgetattr(sys.stdin.fileno())
    except (termios.error, ValueError):
        _saved_tty = None


def restore_terminal() -> None:
    """Leave the alternate screen, show the cursor, restore tty mode."""
    if sys.stdout.isatty():
        sys.stdout.write(LEAVE_ALT_SCREEN + SHOW_CURSOR)
        sys.stdout.flush()
    if _saved_tty is not None:
        import termios

        termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, _saved_tty)


def install_hooks(restore: Callable[[], None] = restore_terminal) -> Callable[[], None]:
    """Wrap sys.excepthook so the terminal is restored before reporting.

    Install before entering raw mode. Returns a function that puts the
    original hook back.
    """
    original_hook = sys.excepthook
    restored = False

    def hook(exc_type, exc, tb) -> None:
        nonlocal restored
        if not restored:
            restored = True
            try:
                restore()
            except Exception:
                logger.debug("Terminal restore failed", exc_info=True)
        original_hook(exc_type, exc, tb)

    if restore is restore_terminal:
        snapshot_terminal()
    sys.excepthook = hook

    def uninstall() -> None:
        sys.excepthook = original_hook

    return uninstall
