"""Footer renderer: key hints, last notice, busy marker."""

from __future__ import annotations

from rich.text import Text

KEY_HINTS = "↑/↓ move   Enter run   q/Esc quit"


def render(notice: str | None = None, busy: str | None = None) -> Text:
    text = Text(KEY_HINTS, style="dim")
    if busy:
        text.append(f"   running: {busy}…", style="bold yellow")
    elif notice:
        text.append(f"   {notice}", style="italic")
    return text
