"""Raw terminal key decoding and non-blocking reads."""

from __future__ import annotations

import os
import select
from typing import Iterator

UP = "up"
DOWN = "down"
ENTER = "enter"
QUIT = "quit"

KEY_MAP = {
    "\x1b[A": UP,
    "\x1bOA": UP,
    "\x1b[B": DOWN,
    "\x1bOB": DOWN,
    "\r": ENTER,
    "\n": ENTER,
    "\r\n": ENTER,
    "\x1b": QUIT,
    "q": QUIT,
    "\x03": QUIT,
}


ESCAPE_PREFIXES = ("\x1b[", "\x1bO")


def decode_key(chunk: str | None) -> str | None:
    if not chunk:
        return None
    return KEY_MAP.get(chunk)


def decode_keys(chunk: str | None) -> Iterator[str]:
    """Split a read into keypresses and yield the recognised ones in order.

    A read may hold several keys (auto-repeat, typing ahead while an action
    blocks). Arrow sequences are three characters; everything else is taken
    one character at a time, so a lone Esc still decodes as quit.
    """
    if not chunk:
        return
    i = 0
    while i < len(chunk):
        if chunk.startswith(ESCAPE_PREFIXES, i) and i + 2 < len(chunk):
            token = chunk[i:i + 3]
        elif chunk.startswith("\r\n", i):
            token = "\r\n"
        else:
            token = chunk[i]
        i += len(token)
        key = KEY_MAP.get(token)
        if key is not None:
            yield key


def poll_key(fd: int, timeout: float = 0.0) -> str | None:
    """Read whatever is pending on fd, waiting at most ``timeout``.

    The result may hold several keypresses; pass it to ``decode_keys``.
    """
    r, _, _ = select.select([fd], [], [], timeout)
    if not r:
        return None
    try:
        return os.read(fd, 1024).decode("utf-8", errors="ignore")
    except OSError:
        return None
