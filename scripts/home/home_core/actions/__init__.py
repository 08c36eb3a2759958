"""Action helpers and package exports."""

from __future__ import annotations

UNKNOWN_ERROR = "unknown error"


def first_line(text: str | None, fallback: str = UNKNOWN_ERROR) -> str:
    """Return the first non-blank line of ``text`` stripped, or ``fallback``."""
    if not text:
        return fallback
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return fallback
