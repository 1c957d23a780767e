"""Human-readable file type labels derived from Pygments lexers."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .entry import Entry

DIRECTORY_LABEL = "dir"
UNKNOWN_LABEL = "file"


@lru_cache(maxsize=1024)
def type_label_for_name(name: str) -> str:
    """Return the lexer display name for ``name`` or ``file`` when unknown."""
    try:
        lexer = get_lexer_for_filename(name)
    except ClassNotFound:
        return UNKNOWN_LABEL
    return str(lexer.name)


def type_label(entry: Entry) -> str:
    if entry.is_directory:
        return DIRECTORY_LABEL
    return type_label_for_name(entry.name)
