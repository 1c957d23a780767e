"""Browser bootstrap: initial directory, display preferences, terminal session."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..browser import Browser
from ..config import load_binary_sizes, load_date_format, load_theme_name, save_last_directory
from ..render import RenderOptions, format_listing
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)


def build_render_options(theme_name: str | None, no_color: bool) -> RenderOptions:
    """Merge CLI theme choice with persisted display preferences."""
    return RenderOptions(
        theme=resolve_theme(theme_name or load_theme_name(), no_color=no_color),
        date_format=load_date_format(),
        binary_sizes=load_binary_sizes(),
    )


def run_browser(path: Path, theme_name: str | None = None, no_color: bool = False, list_only: bool = False) -> None:
    """Load ``path`` and run the interactive browser, or print it when not on a TTY."""
    browser = Browser()
    error = browser.open_directory(path)
    if error is not None:
        raise SystemExit(str(error))

    options = build_render_options(theme_name, no_color)
    if list_only or not os.isatty(sys.stdin.fileno()):
        sys.stdout.write(format_listing(browser.main.entries, options))
        return

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    LOGGER.info("starting in %s", browser.main.current_directory)
    try:
        run_main_loop(browser, terminal, stdin_fd, options, RuntimeLoopTiming())
    finally:
        if browser.main.current_directory is not None:
            save_last_directory(browser.main.current_directory)
