"""Panel rendering helpers."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from home_core.models import MenuModel

STATUS_BORDER = {
    "never": "cyan",
    "success": "green",
    "failed": "red",
}


def border_for(model: MenuModel) -> str:
    kinds = {status.kind for _label, status in model.rows()}
    if "failed" in kinds:
        return STATUS_BORDER["failed"]
    if "success" in kinds:
        return STATUS_BORDER["success"]
    return STATUS_BORDER["never"]


def panel_from_table(title: str, border: str, table: Table) -> Panel:
    return Panel(table, title=f"[bold blue]{title}[/bold blue]", border_style=border)
