"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD and letter shortcuts are read without waiting for Enter,
via tty/termios on macOS / Linux and msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys
import time

_ESC = "\x1b"

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "t": "timer",
    "p": "export",
    "h": "scores",
    "?": "scores",
    "\r": "enter",
    "\n": "enter",
}

_WIN_PREFIXES = (b"\xe0", b"\x00")

_WIN_ARROW_MAP: dict[bytes, str] = {
    b"H": "up",
    b"P": "down",
    b"M": "right",
    b"K": "left",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- unix ----------------------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def pending(wait: float | None) -> bool:
        ready, _, _ = select.select([fd], [], [], wait)
        return bool(ready)

    def read1() -> str:
        # Unbuffered, so select() still sees the rest of an escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        if not pending(timeout):
            return None
        ch = read1()
        if ch != _ESC:
            return _resolve(ch)
        # ESC [ A/B/C/D is an arrow key; a bare Escape quits.
        if not pending(0.1) or read1() != "[":
            return "quit"
        if not pending(0.1):
            return ""
        return _ARROW_MAP.get(read1(), "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- windows -------------------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    ch = msvcrt.getch()
    # Arrow keys arrive as a \xe0 (or \x00) prefix plus a scan code.
    if ch in _WIN_PREFIXES:
        return _WIN_ARROW_MAP.get(msvcrt.getch(), "")
    return _resolve(ch.decode("utf-8", errors="ignore"))


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — slide
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "timer"                        — t (toggle time limit)
        "export"                       — p (write layout JSON)
        "scores"                       — h / ?
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    key = _read(None)
    return key if key is not None else ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _read(timeout)
