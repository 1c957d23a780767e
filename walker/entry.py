"""Entry snapshots for one directory child plus display formatting helpers.

Entries are immutable and rebuilt on every listing; nothing here touches
the filesystem except ``entry_from_dir_entry``.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

UNKNOWN_PERMISSIONS = "?" * 10
EPOCH = datetime.fromtimestamp(0, tz=timezone.utc).astimezone()
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M"

_DECIMAL_UNITS = ("B", "kB", "MB", "GB", "TB", "PB")
_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


@dataclass(frozen=True)
class Entry:
    """Metadata snapshot of one listed child."""

    name: str
    path: Path
    size: int = 0
    permissions: str = UNKNOWN_PERMISSIONS
    modified_at: datetime = EPOCH
    is_directory: bool = False


def entry_from_dir_entry(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from one ``os.scandir`` result.

    ``is_directory`` follows symlinks so linked directories stay enterable;
    size/mode/mtime come from the link itself. Stat failures keep defaults.
    """
    try:
        is_directory = child.is_dir()
    except OSError:
        is_directory = False

    size = 0
    permissions = UNKNOWN_PERMISSIONS
    modified_at = EPOCH
    try:
        st = child.stat(follow_symlinks=False)
    except OSError:
        st = None
    if st is not None:
        permissions = stat.filemode(st.st_mode)
        modified_at = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc).astimezone()
        if not is_directory:
            size = int(st.st_size)

    return Entry(
        name=child.name,
        path=Path(os.path.abspath(child.path)),
        size=size,
        permissions=permissions,
        modified_at=modified_at,
        is_directory=is_directory,
    )


def format_size(size: int, binary: bool = False) -> str:
    """Return a short human-readable size such as ``1.5 kB`` or ``12 B``."""
    base = 1024.0 if binary else 1000.0
    units = _BINARY_UNITS if binary else _DECIMAL_UNITS
    value = float(max(0, size))
    unit_idx = 0
    while value >= base and unit_idx < len(units) - 1:
        value /= base
        unit_idx += 1
    if unit_idx == 0:
        return f"{int(value)} {units[0]}"
    return f"{value:.1f} {units[unit_idx]}"


def format_modified(entry: Entry, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    try:
        return entry.modified_at.strftime(date_format)
    except ValueError:
        return entry.modified_at.strftime(DEFAULT_DATE_FORMAT)


def display_name(entry: Entry) -> str:
    """Return the listing label, with a trailing slash for directories."""
    return f"{entry.name}/" if entry.is_directory else entry.name
