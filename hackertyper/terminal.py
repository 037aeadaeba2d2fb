"""Terminal handling: raw key input, colours, clearing and pacing."""

from __future__ import annotations

import contextlib
import enum
import io
import os
import select
import sys
import time
from collections.abc import Callable, Iterator
from typing import IO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:
    msvcrt = None  # type: ignore[assignment]

CLEAR_SCREEN = "\033[H\033[2J"
CTRL_C = "\x03"
ESCAPE = "\x1b"


class Color(enum.Enum):
    """ANSI sequences for the colours the display uses."""

    GREEN = "\033[32;1m"
    GRAY = "\033[0m\033[37m"
    RED = "\033[31;1m"
    RESET = "\033[0m"


class Terminal:
    """A console with non-blocking single-key input and coloured output."""

    def __init__(
        self,
        stdin: IO | None = None,
        stdout: IO[str] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep
        self._console = msvcrt is not None and self.stdin is sys.stdin
        self.exit_key = ESCAPE if self._console else CTRL_C

    def _fileno(self) -> int | None:
        try:
            return self.stdin.fileno()
        except (AttributeError, ValueError, io.UnsupportedOperation):
            return None

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator["Terminal"]:
        """Turn off line buffering and echo for the duration of the block."""
        fd = self._fileno()
        if termios is None or fd is None or not os.isatty(fd):
            yield self
            return
        saved = termios.tcgetattr(fd)
        changed = termios.tcgetattr(fd)
        changed[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, changed)
        try:
            yield self
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, saved)

    def key_pressed(self, timeout: float = 0.001) -> bool:
        """Return whether a key is waiting, waiting at most ``timeout`` seconds."""
        if self._console:
            return bool(msvcrt.kbhit())
        fd = self._fileno()
        if fd is None:
            return False
        ready, _, _ = select.select([fd], [], [], timeout)
        return bool(ready)

    def read_key(self) -> str:
        """Read one key; ``"\\x00"`` if nothing could be read."""
        if self._console:
            return msvcrt.getwch()
        fd = self._fileno()
        if fd is None:
            return "\x00"
        data = os.read(fd, 1)
        return chr(data[0]) if data else "\x00"

    def is_exit_key(self, key: str) -> bool:
        """Return whether ``key`` ends the session (Esc on consoles, Ctrl+C elsewhere)."""
        return key == self.exit_key

    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        self.write(CLEAR_SCREEN)
        self.flush()

    def set_color(self, color: Color) -> None:
        self.write(color.value)

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def writeline(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def flush(self) -> None:
        self.stdout.flush()

    def sleep_ms(self, ms: float) -> None:
        self._sleep(ms / 1000)