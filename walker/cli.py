"""Command-line front door for walker.

Parses CLI options, resolves the starting directory, sets up logging,
then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .config import load_last_directory, load_restore_last_directory
from .logs import configure_logging
from .runtime import run_browser
from .ui_theme import available_theme_names


def resolve_start_directory(raw_path: str | None, default_path: Path | None = None) -> Path:
    """Pick the directory to open: explicit arg, restored last dir, or cwd."""
    if raw_path is not None:
        return Path(raw_path).expanduser()
    if load_restore_last_directory():
        last = load_last_directory()
        if last is not None:
            return last
    return default_path if default_path is not None else Path.cwd()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch walker on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse, rename and pick copy targets in a terminal file browser.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print the directory listing and exit.")
    parser.add_argument("--log-file", default=None, help="Write debug/diagnostic log records to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    configure_logging(args.log_file)

    path = resolve_start_directory(args.path, default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    run_browser(path.resolve(), args.theme, args.no_color, args.list)


if __name__ == "__main__":
    main()
