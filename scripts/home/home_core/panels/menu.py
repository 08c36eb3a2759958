"""Menu panel renderer."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from home_core.formatting import status_style, status_suffix
from home_core.models import MenuModel
from home_core.panels import border_for, panel_from_table

TITLE = "CLI Home"
HIGHLIGHT_SYMBOL = ">> "
HIGHLIGHT_STYLE = "bold yellow"


def render_row(label: str, suffix: str | None, suffix_style: str, selected: bool) -> Text:
    prefix = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
    line = Text(prefix + label, no_wrap=True, overflow="ellipsis")
    if suffix:
        line.append(suffix, style=suffix_style)
    if selected:
        line.stylize(HIGHLIGHT_STYLE)
    return line


def render(model: MenuModel):
    table = Table.grid(expand=True)
    table.add_column()

    cursor = model.current_index()
    for i, (label, status) in enumerate(model.rows()):
        # The trailing quit row never carries a run status.
        suffix = None if i == model.last_index else status_suffix(status)
        table.add_row(render_row(label, suffix, status_style(status), i == cursor))

    return panel_from_table(TITLE, border_for(model), table)
