"""Terminal session for the dashboard.

Entering the session puts stdin into cbreak mode with signal keys
disabled (so Ctrl+C arrives as a key) and starts a ``rich`` live
display on the alternate screen. Leaving it always restores the
original terminal attributes, also when the render loop fails.
"""

from __future__ import annotations

import contextlib
import logging
import os
import select
import sys
import termios
import tty
from typing import Any, TextIO

from rich.console import Console
from rich.live import Live

from dcsdash.exceptions import DashTerminalError
from dcsdash.render.layout import build_dashboard
from dcsdash.state.snapshot import Snapshot

_logger = logging.getLogger(__name__)

CTRL_C = "\x03"
ESCAPE = "\x1b"
QUIT_KEYS = frozenset({CTRL_C, "q", ESCAPE})


def is_quit_key(key: str) -> bool:
    return key in QUIT_KEYS


def split_keys(text: str) -> list[str]:
    """Split raw terminal input into keys.

    CSI/SS3 sequences (arrow keys and friends) are returned whole, and so
    is an Alt-modified key (``ESC`` plus one character). Only an ``ESC``
    that ends the read is a lone Escape press.
    """
    keys: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == ESCAPE and i + 1 < len(text):
            if text[i + 1] in "[O":
                j = i + 2
                while j < len(text) and not (text[j].isalpha() or text[j] == "~"):
                    j += 1
            else:
                j = i + 1
            keys.append(text[i : j + 1])
            i = j + 1
            continue
        keys.append(char)
        i += 1
    return keys


class TerminalSession:
    """Scoped terminal mode plus live display.

    Implements both the renderer (``draw``) and the key source
    (``poll_keys``) used by :class:`~dcsdash.render.consumer.RenderConsumer`.
    """

    def __init__(self, *, console: Console | None = None, stdin: TextIO | None = None) -> None:
        self._console = console or Console()
        self._stdin = stdin or sys.stdin
        self._fd: int | None = None
        self._live: Live | None = None
        self._stack = contextlib.ExitStack()

    def __enter__(self) -> TerminalSession:
        try:
            fd = self._stdin.fileno()
        except (AttributeError, ValueError, OSError) as exc:
            raise DashTerminalError(f"stdin has no file descriptor: {exc}") from exc
        if not os.isatty(fd):
            raise DashTerminalError("stdin is not a terminal")

        with contextlib.ExitStack() as stack:
            try:
                saved = termios.tcgetattr(fd)
                stack.callback(termios.tcsetattr, fd, termios.TCSADRAIN, saved)
                tty.setcbreak(fd)
                attrs = termios.tcgetattr(fd)
                attrs[3] &= ~termios.ISIG
                termios.tcsetattr(fd, termios.TCSANOW, attrs)
            except termios.error as exc:
                raise DashTerminalError(f"terminal setup failed: {exc}") from exc

            live = Live(console=self._console, screen=True, auto_refresh=False, redirect_stderr=False)
            live.start()
            stack.callback(live.stop)

            self._fd = fd
            self._live = live
            self._stack = stack.pop_all()
        _logger.debug("Terminal session started fd=%d", fd)
        return self

    def __exit__(self, *exc: Any) -> None:
        self._live = None
        self._fd = None
        self._stack.close()
        _logger.debug("Terminal session restored")

    def draw(self, snapshot: Snapshot) -> None:
        if self._live is None:
            raise DashTerminalError("terminal session is not active")
        self._live.update(build_dashboard(snapshot), refresh=True)

    def poll_keys(self) -> list[str]:
        fd = self._fd
        if fd is None:
            return []
        chunks: list[bytes] = []
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 64)
            if not data:
                break
            chunks.append(data)
        if not chunks:
            return []
        return split_keys(b"".join(chunks).decode("utf-8", errors="ignore"))
