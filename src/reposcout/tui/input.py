"""Non-blocking keyboard input via termios cbreak mode."""

from __future__ import annotations

import os
import selectors
import sys
import termios
import tty
from types import TracebackType

# Single control bytes → key names
_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x15": "clear",  # Ctrl+U
}

# Bytes following ESC for the cursor keys the console uses
_ESCAPE_SEQUENCES = {
    "[A": "up",
    "[B": "down",
}


class KeyboardInput:
    """Context manager that reads single keys from stdin without echo.

    Printable characters come back as themselves, control keys by name
    (``enter``, ``tab``, ``backspace``, ``clear``, ``escape``, ``up`` and
    ``down``). Other escape sequences are swallowed. Reads go through
    ``os.read`` on the raw descriptor so that the selector and the reads
    agree on what is pending.

    Usage::

        with KeyboardInput() as kb:
            key = kb.read(timeout=0.05)  # key name, character, or None
    """

    def __init__(self) -> None:
        self._old_settings: list | None = None
        self._selector = selectors.DefaultSelector()
        self._fd: int = sys.stdin.fileno()

    def __enter__(self) -> KeyboardInput:
        self._old_settings = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        self._selector.register(self._fd, selectors.EVENT_READ)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._selector.unregister(self._fd)
        self._selector.close()
        if self._old_settings is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)

    def _read_byte(self) -> str:
        return os.read(self._fd, 1).decode("utf-8", errors="replace")

    def read(self, timeout: float = 0.05) -> str | None:
        """Return the next key, or None if nothing arrives within ``timeout``."""
        if not self._selector.select(timeout=timeout):
            return None

        ch = self._read_byte()
        if ch == "\x1b":
            return self._read_escape_sequence()
        return _CONTROL_KEYS.get(ch, ch)

    def _read_escape_sequence(self) -> str | None:
        seq = ""
        for _ in range(2):
            if not self._selector.select(timeout=0.02):
                break
            seq += self._read_byte()
        return key_for_escape(seq)


def key_for_escape(seq: str) -> str | None:
    """Name the key behind the bytes read after ESC, or None to ignore it."""
    if not seq:
        return "escape"
    return _ESCAPE_SEQUENCES.get(seq)
