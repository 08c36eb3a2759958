"""Status text and style helpers for menu rows."""

from __future__ import annotations

from home_core.models import Failed, Never, RunStatus, Success

STATUS_STYLES = {
    "never": "dim",
    "success": "bold green",
    "failed": "bold red",
}


def status_suffix(status: RunStatus) -> str:
    if isinstance(status, Failed):
        return f" (failed: {status.message})"
    if isinstance(status, Success):
        return " (success)"
    if isinstance(status, Never):
        return " (never run)"
    raise TypeError(f"unknown run status: {status!r}")


def status_style(status: RunStatus) -> str:
    return STATUS_STYLES.get(status.kind, "default")
