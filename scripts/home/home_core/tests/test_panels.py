from __future__ import annotations

import io
import unittest
from pathlib import Path
import sys

from rich.console import Console
from rich.panel import Panel

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from home_core.formatting import status_style, status_suffix  # noqa: E402
from home_core.models import Failed, Never, Success, default_menu  # noqa: E402
from home_core.panels import border_for  # noqa: E402
from home_core.panels.footer import render as render_footer  # noqa: E402
from home_core.panels.menu import render as render_menu  # noqa: E402


def render_text(renderable) -> str:
    console = Console(record=True, width=100, file=io.StringIO(), color_system=None)
    console.print(renderable)
    return console.export_text()


class FormattingTests(unittest.TestCase):
    def test_suffixes(self):
        self.assertEqual(status_suffix(Never()), " (never run)")
        self.assertEqual(status_suffix(Success()), " (success)")
        self.assertEqual(status_suffix(Failed("E: nope")), " (failed: E: nope)")

    def test_styles(self):
        self.assertEqual(status_style(Never()), "dim")
        self.assertEqual(status_style(Success()), "bold green")
        self.assertEqual(status_style(Failed("x")), "bold red")


class MenuPanelTests(unittest.TestCase):
    def test_renders_panel_with_title(self):
        panel = render_menu(default_menu())
        self.assertIsInstance(panel, Panel)
        self.assertIn("CLI Home", str(panel.title))

    def test_rows_carry_status_except_quit(self):
        text = render_text(render_menu(default_menu()))
        self.assertIn(">> Check for updates (never run)", text)
        self.assertIn("Weather (never run)", text)
        self.assertIn("Check Repo (Git only) (never run)", text)
        self.assertIn("quit", text)
        self.assertNotIn("quit (", text)

    def test_cursor_row_is_marked(self):
        model = default_menu()
        model.move_down()
        model.set_status(0, Failed("E: Unable to locate package"))
        text = render_text(render_menu(model))
        self.assertIn(">> Weather", text)
        self.assertNotIn(">> Check for updates", text)
        self.assertIn("Check for updates (failed: E: Unable to locate package)", text)

    def test_border_tracks_outcomes(self):
        model = default_menu()
        self.assertEqual(border_for(model), "cyan")
        model.set_status(0, Success())
        self.assertEqual(border_for(model), "green")
        model.set_status(1, Failed("x"))
        self.assertEqual(border_for(model), "red")


class FooterTests(unittest.TestCase):
    def test_notice_and_busy(self):
        self.assertIn("Checking", render_footer(notice="Checking").plain)
        busy = render_footer(notice="Checking", busy="Check for updates").plain
        self.assertIn("running: Check for updates", busy)
        self.assertNotIn("Checking", busy)


if __name__ == "__main__":
    unittest.main()
