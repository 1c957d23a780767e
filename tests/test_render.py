"""Tests for frame building: layout, selection marker, edit box, and scrolling."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from walker.ansi import display_width
from walker.browser import Browser
from walker.entry import Entry
from walker.render import (
    RenderOptions,
    Viewport,
    build_frame,
    build_status_line,
    clamp_scroll_start,
    edit_box_content,
    format_entry_row,
    format_listing,
    panel_rows,
)
from walker.ui_theme import PLAIN_THEME

PLAIN = RenderOptions(theme=PLAIN_THEME)


class ScrollTests(unittest.TestCase):
    def test_clamp_scroll_start_keeps_selection_visible(self) -> None:
        self.assertEqual(clamp_scroll_start(0, 5, 10, 50), 0)
        self.assertEqual(clamp_scroll_start(25, 0, 10, 50), 16)
        self.assertEqual(clamp_scroll_start(12, 10, 10, 50), 10)
        self.assertEqual(clamp_scroll_start(None, 40, 10, 12), 2)
        self.assertEqual(clamp_scroll_start(3, 0, 10, 4), 0)


class RowFormattingTests(unittest.TestCase):
    def test_entry_row_has_exact_width(self) -> None:
        entry = Entry(name="ファイル.txt", path=Path("/x/ファイル.txt"), size=2048)
        for width in (20, 40, 90):
            row = format_entry_row(entry, width, selected=False, options=PLAIN)
            self.assertEqual(display_width(row), width)

    def test_selected_row_has_marker(self) -> None:
        entry = Entry(name="a.txt", path=Path("/x/a.txt"))
        self.assertTrue(format_entry_row(entry, 60, True, PLAIN).startswith("> a.txt"))
        self.assertTrue(format_entry_row(entry, 60, False, PLAIN).startswith("  a.txt"))

    def test_directory_row_shows_slash_and_type(self) -> None:
        entry = Entry(name="src", path=Path("/x/src"), is_directory=True)
        row = format_entry_row(entry, 90, False, PLAIN)
        self.assertIn("src/", row)
        self.assertIn("dir", row)

    def test_status_line_fills_width(self) -> None:
        line = build_status_line("3 entries", 40)
        self.assertEqual(len(line), 39)
        self.assertTrue(line.startswith("3 entries"))
        self.assertTrue(line.endswith("q quit"))

    def test_edit_box_content_highlights_cursor_and_scrolls(self) -> None:
        content = edit_box_content("abcdef", 6, 4, PLAIN)
        self.assertEqual(content, "def_")
        content = edit_box_content("abc", 1, 6, PLAIN)
        self.assertEqual(content, "abc   ")

    def test_format_listing_one_line_per_entry(self) -> None:
        entries = (
            Entry(name="a.txt", path=Path("/x/a.txt"), size=5, permissions="-rw-r--r--"),
            Entry(name="d", path=Path("/x/d"), permissions="drwxr-xr-x", is_directory=True),
        )
        lines = format_listing(entries, PLAIN).splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("-rw-r--r--"))
        self.assertTrue(lines[0].endswith("a.txt"))
        self.assertTrue(lines[1].endswith("d/"))


class FrameTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).absolute()
        for idx in range(30):
            (self.root / f"file{idx:02d}.txt").write_text("x", encoding="utf-8")
        self.browser = Browser()
        self.browser.set_directory(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_frame_fills_terminal_height(self) -> None:
        lines = build_frame(self.browser, 100, 20, PLAIN)
        self.assertEqual(len(lines), 20)
        self.assertIn(str(self.root), lines[0])
        self.assertTrue(any(line.startswith("> file00.txt") for line in lines))
        self.assertTrue(any("Normal" in line for line in lines))

    def test_viewport_follows_selection(self) -> None:
        viewport = Viewport()
        self.browser.main.select_index(29)
        lines = build_frame(self.browser, 100, 20, PLAIN, viewport)
        self.assertTrue(any(line.startswith("> file29.txt") for line in lines))
        self.assertGreater(viewport.starts[self.browser.active_panel], 0)
        self.assertEqual(panel_rows(20), 15)

    def test_rename_box_shows_buffer(self) -> None:
        self.browser.main.begin_rename()
        lines = build_frame(self.browser, 80, 20, PLAIN)
        box = "\n".join(lines[-4:-1])
        self.assertIn("Rename", box)
        self.assertIn("file00.txt", box)

    def test_copy_mode_renders_two_panels(self) -> None:
        self.browser.begin_copy()
        lines = build_frame(self.browser, 120, 20, PLAIN)
        self.assertIn("destination", lines[1])
        self.assertIn("│", lines[1])
        self.assertTrue(any("Copy" in line for line in lines[-4:-1]))
        for line in lines:
            self.assertEqual(display_width(line), 120 if line is not lines[-1] else 119)

    def test_status_message_replaces_entry_count(self) -> None:
        self.assertIn("1/30 entries", build_frame(self.browser, 100, 20, PLAIN)[-1])
        self.browser.status_message = "Cannot list /nope: no such directory"
        self.assertIn("Cannot list /nope", build_frame(self.browser, 100, 20, PLAIN)[-1])


if __name__ == "__main__":
    unittest.main()
