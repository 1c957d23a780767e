"""CLI argument and start-directory behavior tests.

Verifies how ``walker.cli.main`` chooses the directory it opens and
how options are forwarded to the runtime.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from walker import cli


class CliStartDirectoryTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("walker.cli.configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_main_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["walker"]), mock.patch(
                    "walker.cli.load_restore_last_directory", return_value=False
                ), mock.patch("walker.cli.run_browser") as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

        run_browser.assert_called_once()
        path, theme, no_color, list_only = run_browser.call_args.args
        self.assertEqual(path, root)
        self.assertIsNone(theme)
        self.assertFalse(no_color)
        self.assertFalse(list_only)

    def test_explicit_path_and_flags_are_forwarded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            argv = ["walker", str(root), "--theme", "ocean", "--no-color", "--list"]
            with mock.patch.object(sys, "argv", argv), mock.patch("walker.cli.run_browser") as run_browser:
                cli.main(default_path=root / "unused")

        path, theme, no_color, list_only = run_browser.call_args.args
        self.assertEqual(path, root)
        self.assertEqual(theme, "ocean")
        self.assertTrue(no_color)
        self.assertTrue(list_only)

    def test_restored_last_directory_is_used_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            last = Path(tmp).resolve()
            with mock.patch("walker.cli.load_restore_last_directory", return_value=True), mock.patch(
                "walker.cli.load_last_directory", return_value=last
            ):
                self.assertEqual(cli.resolve_start_directory(None, Path("/elsewhere")), last)
                self.assertEqual(cli.resolve_start_directory(str(last / "x")), last / "x")

    def test_missing_or_file_paths_exit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            for bad, message in ((Path(tmp) / "missing", "Path not found"), (target, "Not a directory")):
                with mock.patch.object(sys, "argv", ["walker", str(bad)]), mock.patch(
                    "walker.cli.run_browser"
                ) as run_browser:
                    with self.assertRaises(SystemExit) as ctx:
                        cli.main()
                self.assertIn(message, str(ctx.exception))
                run_browser.assert_not_called()

    def test_list_mode_prints_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "hello.txt").write_text("hi", encoding="utf-8")
            stdout = io.StringIO()
            with mock.patch.object(sys, "argv", ["walker", str(root), "--list"]), mock.patch(
                "walker.config.CONFIG_PATH", root / "config.json"
            ), redirect_stdout(stdout):
                cli.main()

        self.assertIn("hello.txt", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
