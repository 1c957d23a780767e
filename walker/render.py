"""Frame building and terminal output for the browser UI.

``build_frame`` is pure: it turns a ``Browser`` into a list of screen rows.
``render_frame`` writes those rows to stdout in one syscall.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import datetime

from .ansi import display_width, fit_cell, sanitize
from .browser import Browser, PanelKind
from .edit_mode import EditingMode, EditKind
from .entry import DEFAULT_DATE_FORMAT, Entry, display_name, format_modified, format_size
from .filetypes import type_label
from .panel import PanelSnapshot
from .ui_theme import DEFAULT_THEME, UITheme

APP_TITLE = "Walker"
EDIT_BOX_ROWS = 3
PANEL_CHROME_ROWS = 2
MIN_NAME_WIDTH = 12
TYPE_WIDTH = 12
PERMISSIONS_WIDTH = 10
SIZE_WIDTH = 9

NORMAL_HINT = "j/k move  l enter  h parent  r rename  y copy  Tab panel  q quit"
COPY_HINT = "browse to a destination  Tab switch panel  Esc cancel"


@dataclass(frozen=True)
class RenderOptions:
    theme: UITheme = DEFAULT_THEME
    date_format: str = DEFAULT_DATE_FORMAT
    binary_sizes: bool = False


@dataclass
class Viewport:
    """Per-panel scroll offsets owned by the runtime loop."""

    starts: dict[PanelKind, int] = field(default_factory=lambda: {kind: 0 for kind in PanelKind})


def clamp_scroll_start(selected: int | None, start: int, rows: int, total: int) -> int:
    """Return a first-visible index that keeps ``selected`` on screen."""
    rows = max(1, rows)
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + rows:
            start = selected - rows + 1
    return max(0, min(start, max(0, total - rows)))


def build_status_line(left_text: str, width: int, right_text: str = "│ q quit") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _date_width(date_format: str) -> int:
    try:
        return min(24, len(datetime.now().strftime(date_format)))
    except ValueError:
        return len(DEFAULT_DATE_FORMAT)


def _meta_columns(width: int, options: RenderOptions) -> list[tuple[str, int]]:
    """Pick the metadata columns that fit beside a readable name column."""
    candidates = [
        ("type", TYPE_WIDTH),
        ("permissions", PERMISSIONS_WIDTH),
        ("size", SIZE_WIDTH),
        ("modified", _date_width(options.date_format)),
    ]
    chosen: list[tuple[str, int]] = []
    used = 2
    for name, col_width in candidates:
        if width - used - (col_width + 1) < MIN_NAME_WIDTH:
            break
        chosen.append((name, col_width))
        used += col_width + 1
    return chosen


def _meta_value(column: str, entry: Entry, options: RenderOptions) -> str:
    if column == "type":
        return type_label(entry)
    if column == "permissions":
        return entry.permissions
    if column == "size":
        return format_size(entry.size, binary=options.binary_sizes)
    return format_modified(entry, options.date_format)


def format_entry_row(entry: Entry, width: int, selected: bool, options: RenderOptions) -> str:
    """Render one table row without styling, exactly ``width`` columns wide."""
    columns = _meta_columns(width, options)
    name_width = width - 2 - sum(col_width + 1 for _name, col_width in columns)
    parts = ["> " if selected else "  ", fit_cell(sanitize(display_name(entry)), name_width)]
    for column, col_width in columns:
        parts.append(" ")
        parts.append(fit_cell(_meta_value(column, entry, options), col_width, align_right=column == "size"))
    return fit_cell("".join(parts), width)


def _header_row(width: int, options: RenderOptions) -> str:
    columns = _meta_columns(width, options)
    name_width = width - 2 - sum(col_width + 1 for _name, col_width in columns)
    parts = ["  ", fit_cell("Name", name_width)]
    for column, col_width in columns:
        parts.append(" ")
        parts.append(fit_cell(column.capitalize(), col_width, align_right=column == "size"))
    return fit_cell("".join(parts), width)


def build_panel_lines(
    snapshot: PanelSnapshot,
    label: str,
    width: int,
    rows: int,
    start: int,
    active: bool,
    options: RenderOptions,
) -> list[str]:
    """Build ``rows`` styled lines for one panel: title, header, entries."""
    theme = options.theme
    width = max(1, width)
    directory = str(snapshot.current_directory) if snapshot.current_directory is not None else "-"
    title_style = theme.panel_active if active else theme.panel_inactive
    lines = [title_style + fit_cell(f" {label}: {sanitize(directory)}", width) + theme.reset]
    if rows <= 1:
        return lines[:rows]
    lines.append(theme.header + _header_row(width, options) + theme.reset)

    entry_rows = max(0, rows - PANEL_CHROME_ROWS)
    for idx in range(start, min(len(snapshot.entries), start + entry_rows)):
        entry = snapshot.entries[idx]
        is_selected = idx == snapshot.selection_index
        row = format_entry_row(entry, width, is_selected, options)
        if is_selected:
            style = theme.selected if active else theme.reverse
        else:
            style = theme.entry_dir if entry.is_directory else theme.entry_file
        lines.append(style + row + theme.reset)
    if not snapshot.entries and entry_rows > 0:
        lines.append(theme.hint + fit_cell("  (empty)", width) + theme.reset)
    while len(lines) < rows:
        lines.append(" " * width)
    return lines


def _boxed(title: str, content: str, width: int, options: RenderOptions, style: str) -> list[str]:
    theme = options.theme
    inner = max(0, width - 2)
    title_text = f" {title} "
    top_fill = "─" * max(0, inner - 1 - display_width(title_text))
    top = fit_cell(f"┌─{title_text}{top_fill}┐", width)
    bottom = fit_cell("└" + "─" * inner + "┘", width)
    return [
        style + top + theme.reset,
        style + "│" + theme.reset + content + style + "│" + theme.reset,
        style + bottom + theme.reset,
    ]


def edit_box_content(text: str, cursor: int, inner_width: int, options: RenderOptions) -> str:
    """Return the visible slice of ``text`` with the cursor cell highlighted."""
    theme = options.theme
    if inner_width <= 0:
        return ""
    scroll = max(cursor, inner_width - 1) - (inner_width - 1)
    visible = text[scroll : scroll + inner_width]
    local = cursor - scroll
    before = sanitize(visible[:local])
    under = sanitize(visible[local : local + 1]) or " "
    after = sanitize(visible[local + 1 :])
    cursor_style = theme.reverse or ""
    cursor_reset = theme.reset or ""
    if not cursor_style:
        under = "_" if under == " " else under
    body = before + cursor_style + under + cursor_reset + after
    return body + " " * max(0, inner_width - display_width(before + under + after))


def build_edit_box(snapshot: PanelSnapshot, width: int, options: RenderOptions) -> list[str]:
    theme = options.theme
    inner = max(0, width - 2)
    mode = snapshot.edit_mode
    if isinstance(mode, EditingMode) and mode.kind is EditKind.RENAME:
        content = edit_box_content(snapshot.text, snapshot.text_cursor, inner, options)
        return _boxed("Rename", content, width, options, theme.mode_edit)
    if isinstance(mode, EditingMode) and mode.kind is EditKind.COPY:
        content = fit_cell(f"{sanitize(mode.target.name)}: {COPY_HINT}", inner)
        return _boxed("Copy", content, width, options, theme.mode_edit)
    return _boxed("Normal", theme.hint + fit_cell(NORMAL_HINT, inner) + theme.reset, width, options, theme.mode_normal)


def panel_rows(height: int) -> int:
    """Rows available to each panel (title + header + entries)."""
    return max(1, height - 1 - EDIT_BOX_ROWS - 1)


def visible_entry_rows(height: int) -> int:
    return max(1, panel_rows(height) - PANEL_CHROME_ROWS)


def _status_text(browser: Browser) -> str:
    if browser.status_message:
        return browser.status_message
    snapshot = browser.active.snapshot()
    total = len(snapshot.entries)
    if snapshot.selection_index is None:
        return f"{total} entries"
    return f"{snapshot.selection_index + 1}/{total} entries  [{browser.active_panel.value}]"


def build_frame(
    browser: Browser,
    width: int,
    height: int,
    options: RenderOptions | None = None,
    viewport: Viewport | None = None,
) -> list[str]:
    """Build every screen row for the current browser state."""
    options = options or RenderOptions()
    viewport = viewport or Viewport()
    theme = options.theme
    width = max(10, width)
    height = max(EDIT_BOX_ROWS + 3, height)

    active = browser.active.snapshot()
    directory = str(active.current_directory) if active.current_directory is not None else ""
    lines = [theme.title + fit_cell(f" {APP_TITLE} │ {sanitize(directory)}", width) + theme.reset]

    rows = panel_rows(height)
    entry_rows = visible_entry_rows(height)
    panels = [PanelKind.MAIN, PanelKind.SECONDARY] if browser.dual_panel_visible else [browser.active_panel]
    left_width = width // 2 if len(panels) == 2 else width
    widths = [left_width, width - left_width - 1] if len(panels) == 2 else [width]

    columns: list[list[str]] = []
    for kind, panel_width in zip(panels, widths):
        snapshot = browser.panel(kind).snapshot()
        start = clamp_scroll_start(
            snapshot.selection_index,
            viewport.starts.get(kind, 0),
            entry_rows,
            len(snapshot.entries),
        )
        viewport.starts[kind] = start
        label = "main" if kind is PanelKind.MAIN else "destination"
        columns.append(
            build_panel_lines(
                snapshot,
                label,
                panel_width,
                rows,
                start,
                kind is browser.active_panel,
                options,
            )
        )

    for row_idx in range(rows):
        if len(columns) == 2:
            lines.append(columns[0][row_idx] + theme.divider + "│" + theme.reset + columns[1][row_idx])
        else:
            lines.append(columns[0][row_idx])

    edit_source = browser.active.snapshot()
    if not edit_source.edit_mode.is_editing and browser.dual_panel_visible:
        edit_source = browser.main.snapshot()
    lines.extend(build_edit_box(edit_source, width, options))
    lines.append(theme.status + build_status_line(_status_text(browser), width) + theme.reset)
    return lines


def render_frame(lines: list[str]) -> None:
    out: list[str] = ["\033[H"]
    for idx, line in enumerate(lines):
        out.append(line)
        out.append("\033[K")
        if idx < len(lines) - 1:
            out.append("\r\n")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))


def format_listing(entries: tuple[Entry, ...], options: RenderOptions | None = None) -> str:
    """Plain one-line-per-entry listing used when no interactive TTY is available."""
    options = options or RenderOptions()
    out: list[str] = []
    for entry in entries:
        size = format_size(entry.size, binary=options.binary_sizes)
        out.append(
            f"{entry.permissions} {size:>{SIZE_WIDTH}} {format_modified(entry, options.date_format)} "
            f"{sanitize(display_name(entry))}\n"
        )
    return "".join(out)
