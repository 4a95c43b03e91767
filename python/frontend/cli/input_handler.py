"""Cross-platform single-keypress reader for CLI frontends.

Reads the menu choice without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "1": "continue",
    "c": "continue",
    "C": "continue",
    " ": "continue",
    "2": "solve",
    "v": "solve",
    "V": "solve",
    "3": "reset",
    "r": "reset",
    "R": "reset",
    "4": "quit",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "continue"  — 1 / c / space (one search step)
        "solve"     — 2 / v (run to completion)
        "reset"     — 3 / r (new random puzzle)
        "quit"      — 4 / q / Ctrl-C / Escape
        ""          — unrecognised key (arrows, F-keys, ...)
    """
    ch = _getch()

    # Escape sequences: ESC [ <params> <final> or ESC O <final>
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            while not "\x40" <= ch3 <= "\x7e":
                ch3 = _getch()
            return ""
        if ch2 == "O":
            _getch()
            return ""
        return "quit"  # bare Escape

    return resolve(ch)
