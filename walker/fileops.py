"""Filesystem mutations requested by the edit-mode state machine."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .entry import Entry
from .errors import RenameError

LOGGER = logging.getLogger(__name__)


def rename_target_path(entry: Entry, new_name: str) -> Path:
    """Resolve ``new_name`` against the entry's parent unless it is absolute.

    A leading ``~`` is kept literally; names are never home-expanded.
    """
    candidate = Path(new_name)
    if candidate.is_absolute():
        return candidate
    return entry.path.parent / candidate


def rename_entry(entry: Entry, new_name: str) -> Path:
    """Rename ``entry`` to ``new_name`` and return the destination path.

    Refuses empty names and existing destinations instead of overwriting.
    Raises ``RenameError`` on refusal or when the filesystem rejects the rename.
    """
    name = new_name.strip()
    if not name:
        raise RenameError(entry.path, new_name, "name cannot be empty")
    if "\x00" in name:
        raise RenameError(entry.path, name, "name cannot contain a NUL character")

    target = rename_target_path(entry, name)
    if target == entry.path:
        return target
    if os.path.lexists(target):
        raise RenameError(entry.path, name, "a file or directory with that name already exists")

    try:
        os.rename(entry.path, target)
    except (OSError, ValueError) as exc:
        raise RenameError(entry.path, name, getattr(exc, "strerror", None) or str(exc)) from exc
    LOGGER.info("renamed %s -> %s", entry.path, target)
    return target
