"""One-level directory listing.

Wraps ``os.scandir`` into a name-sorted tuple of ``Entry`` values and turns
every failure into ``ListingError``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .entry import Entry, entry_from_dir_entry
from .errors import ListingError

LOGGER = logging.getLogger(__name__)


def list_directory(directory: Path | str) -> tuple[Entry, ...]:
    """Return immediate children of ``directory`` sorted by name.

    The directory itself is never part of the result. Raises
    ``ListingError`` when the path is missing, not a directory, or unreadable.
    """
    path = Path(directory)
    if not path.exists():
        raise ListingError(path, "no such directory")
    if not path.is_dir():
        raise ListingError(path, "not a directory")

    entries: list[Entry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                entries.append(entry_from_dir_entry(child))
    except OSError as exc:
        raise ListingError(path, exc.strerror or str(exc)) from exc

    entries.sort(key=lambda entry: entry.name)
    LOGGER.debug("listed %s: %d entries", path, len(entries))
    return tuple(entries)
