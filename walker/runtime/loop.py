"""Main interactive event loop for the terminal UI.

Reads key tokens, maps them to commands for the active edit mode, dispatches
them to the ``Browser`` and redraws when something changed. Feature logic
lives in ``Browser``/``Panel``; this loop is wiring only.
"""

from __future__ import annotations

import logging
import os
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..browser import Browser
from ..input import read_key as default_read_key
from ..keymap import ModalKeyMaps
from ..render import RenderOptions, Viewport, build_frame, render_frame

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_ms: int = 120
    status_message_seconds: float = 4.0


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF and CRLF into one ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the key was the
    LF half of a CRLF pair and should be dropped.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    browser: Browser,
    terminal,
    stdin_fd: int,
    options: RenderOptions,
    timing: RuntimeLoopTiming | None = None,
    *,
    read_key: Callable[[int, int | None], str] = default_read_key,
    render: Callable[[list[str]], None] = render_frame,
    terminal_size: Callable[[], os.terminal_size] = lambda: shutil.get_terminal_size((80, 24)),
) -> None:
    """Run the interactive loop until a quit command is dispatched."""
    timing = timing or RuntimeLoopTiming()
    keymaps = ModalKeyMaps()
    viewport = Viewport()
    dirty = True
    skip_next_lf = False
    last_size: tuple[int, int] | None = None
    shown_message = ""
    message_since = 0.0

    with terminal.raw_mode():
        while True:
            term = terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True

            now = time.monotonic()
            if browser.status_message != shown_message:
                shown_message = browser.status_message
                message_since = now
                dirty = True
            elif shown_message and now - message_since >= timing.status_message_seconds:
                browser.status_message = ""
                shown_message = ""
                dirty = True

            if dirty:
                render(build_frame(browser, term.columns, term.lines, options, viewport))
                dirty = False

            try:
                key = read_key(stdin_fd, timing.poll_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized is None:
                continue

            command = keymaps.command_for(normalized, browser.edit_kind())
            if command is None:
                continue
            if browser.dispatch(command):
                LOGGER.debug("quit requested")
                break
            dirty = True
