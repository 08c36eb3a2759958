"""CLI Home application entrypoint: menu loop, output modes, logging setup."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Callable, Optional

from rich.console import Console, Group
from rich.live import Live

from home_core import keys
from home_core.dispatcher import activate
from home_core.models import MenuModel, default_menu
from home_core.panels.footer import render as render_footer
from home_core.panels.menu import render as render_menu
from home_core.settings import LOG_LEVELS, SettingsError, resolve_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(log_file: str | None, level: str = "WARNING") -> logging.Logger:
    """Route package logs to ``log_file``; stay silent otherwise.

    Nothing may be written to the terminal while the menu owns the screen.
    """
    package_logger = logging.getLogger("home_core")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if log_file:
        handler = logging.FileHandler(log_file, mode="a")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    else:
        package_logger.addHandler(logging.NullHandler())
    return package_logger


def menu_mode(attrs: list) -> list:
    """Return a copy of tcgetattr ``attrs`` set up for the menu loop.

    Non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) rather than
    tty.setraw() so Rich Live's alternate screen keeps working over SSH.
    ISIG is off as well: Ctrl+C arrives as a byte and is read like any other
    quit key, and never signals a running update command.
    """
    import termios

    new = list(attrs)
    new[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
    new[6] = list(attrs[6])
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = 0
    return new


class App:
    """Owns the menu model and the running flag for one session."""

    def __init__(self, settings: dict, model: MenuModel | None = None):
        self.settings = settings
        self.model = model if model is not None else default_menu()
        self.running = True
        self.notice: str | None = None
        self.busy: str | None = None

    def renderable(self):
        return Group(render_menu(self.model), render_footer(self.notice, self.busy))

    def quit(self) -> None:
        self.running = False

    def handle_key(self, key: str | None, redraw: Optional[Callable[[], None]] = None) -> None:
        if key is None:
            return
        if key == keys.QUIT:
            self.quit()
        elif key == keys.UP:
            self.model.move_up()
        elif key == keys.DOWN:
            self.model.move_down()
        elif key == keys.ENTER:
            self._activate(redraw)

    def handle_chunk(self, chunk: str | None, redraw: Optional[Callable[[], None]] = None) -> None:
        for key in keys.decode_keys(chunk):
            if not self.running:
                break
            self.handle_key(key, redraw)

    def _activate(self, redraw: Optional[Callable[[], None]]) -> None:
        index = self.model.current_index()
        if index != self.model.last_index:
            self.busy = self.model.label_of(index)
            if redraw is not None:
                redraw()
        try:
            activation = activate(self.model, self.settings)
        finally:
            self.busy = None
        self.notice = activation.notice
        if activation.quit:
            self.quit()

    def run(self, console: Console) -> None:
        """Run the interactive menu until a quit trigger clears ``running``.

        Previous terminal settings are always restored.
        """
        import termios

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        termios.tcsetattr(fd, termios.TCSADRAIN, menu_mode(termios.tcgetattr(fd)))

        interval = float(self.settings.get("poll_interval", 0.1))
        try:
            with Live(self.renderable(), console=console, auto_refresh=False, screen=True) as live:

                def redraw() -> None:
                    live.update(self.renderable(), refresh=True)

                while self.running:
                    chunk = keys.poll_key(fd, interval)
                    if not chunk:
                        continue
                    self.handle_chunk(chunk, redraw)
                    redraw()
        except KeyboardInterrupt:
            self.quit()
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        logger.info("menu closed")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI Home admin menu")
    parser.add_argument("--snapshot", action="store_true", help="Print the menu once and exit")
    parser.add_argument("--json", action="store_true", help="Emit the menu state as JSON")
    parser.add_argument("--config", default=os.environ.get("CLI_HOME_CONFIG"), help="Optional JSON settings file")
    parser.add_argument("--log-file", default=os.environ.get("CLI_HOME_LOG_FILE"), help="Append logs to this file")
    parser.add_argument("--log-level", type=str.upper, choices=sorted(LOG_LEVELS), help="Log level override")
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args.config)
    except SettingsError as exc:
        parser.error(str(exc))

    try:
        configure_logging(args.log_file or settings["log_file"], args.log_level or settings["log_level"])
    except OSError as exc:
        parser.error(f"cannot open log file: {exc}")
    app = App(settings)

    if args.json:
        print(json.dumps(app.model.to_dict(), indent=2))
        return 0

    console = Console()
    if args.snapshot or not sys.stdin.isatty():
        if not args.snapshot:
            logger.warning("stdin is not a terminal; printing a snapshot instead")
        console.print(app.renderable())
        return 0

    app.run(console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
