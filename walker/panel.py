"""Per-panel browsing state machine.

A ``Panel`` owns one directory context: the current directory, its listing,
the selection cursor, and the edit mode with its text buffer. Every
operation is total: selection-dependent calls without a selection, or edit
calls in the wrong mode, are no-ops. Filesystem failures never change state
and are returned to the caller instead of raised.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .commands import CursorMove
from .edit_mode import NORMAL, EditingMode, EditKind, EditMode, is_renaming
from .entry import Entry
from .errors import ListingError, RenameError
from .fileops import rename_entry
from .lister import list_directory
from .text_input import TextInput

LOGGER = logging.getLogger(__name__)

Lister = Callable[[Path], tuple[Entry, ...]]
Renamer = Callable[[Entry, str], Path]


class Direction(Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class PanelSnapshot:
    """Read-only view of one panel handed to the presentation layer."""

    current_directory: Path | None
    entries: tuple[Entry, ...]
    selection_index: int | None
    edit_mode: EditMode
    text: str
    text_cursor: int


def normalize_directory(path: Path | str) -> Path:
    """Return an absolute, lexically normalized path without resolving links."""
    return Path(os.path.abspath(os.path.expanduser(str(path))))


def wrapped_index(index: int, direction: Direction, count: int) -> int:
    """Step ``index`` one slot around a ring of ``count`` entries."""
    step = -1 if direction is Direction.UP else 1
    return (index + step) % count


@dataclass
class Panel:
    lister: Lister = list_directory
    renamer: Renamer = rename_entry
    current_directory: Path | None = None
    entries: tuple[Entry, ...] = ()
    selection_index: int | None = None
    edit_mode: EditMode = NORMAL
    text_input: TextInput = field(default_factory=TextInput)

    # -- listing ---------------------------------------------------------

    def set_directory(self, path: Path | str) -> ListingError | None:
        """Switch to ``path`` and reload its listing.

        On failure the previous directory, entries and selection are kept
        and the ``ListingError`` is returned.
        """
        target = normalize_directory(path)
        try:
            entries = tuple(self.lister(target))
        except ListingError as exc:
            LOGGER.warning("%s", exc)
            return exc
        self.current_directory = target
        self.entries = entries
        self.selection_index = 0 if entries else None
        return None

    def reload(self) -> ListingError | None:
        if self.current_directory is None:
            return None
        return self.set_directory(self.current_directory)

    # -- selection -------------------------------------------------------

    def selected_entry(self) -> Entry | None:
        idx = self.selection_index
        if idx is None or not (0 <= idx < len(self.entries)):
            return None
        return self.entries[idx]

    def move_selection(self, direction: Direction) -> bool:
        """Move the cursor one entry with wraparound; ``False`` when empty."""
        if self.selected_entry() is None:
            return False
        self.selection_index = wrapped_index(self.selection_index, direction, len(self.entries))
        return True

    def select_index(self, index: int) -> bool:
        if not self.entries:
            return False
        self.selection_index = max(0, min(index, len(self.entries) - 1))
        return True

    # -- traversal -------------------------------------------------------

    def enter_selected_directory(self) -> ListingError | None:
        entry = self.selected_entry()
        if entry is None or not entry.is_directory or self.current_directory is None:
            return None
        return self.set_directory(self.current_directory / entry.name)

    def go_to_parent(self) -> ListingError | None:
        current = self.current_directory
        if current is None:
            return None
        parent = current.parent
        if parent == current:
            return None
        return self.set_directory(parent)

    # -- edit mode -------------------------------------------------------

    def _begin(self, kind: EditKind) -> bool:
        if self.edit_mode.is_editing:
            return False
        entry = self.selected_entry()
        if entry is None:
            return False
        self.edit_mode = EditingMode(kind=kind, target=entry)
        if kind is EditKind.RENAME:
            self.text_input = TextInput.with_value(entry.name)
        else:
            self.text_input = TextInput()
        LOGGER.debug("begin %s of %s", kind.value, entry.path)
        return True

    def begin_rename(self) -> bool:
        """Enter rename mode with the selected name pre-filled in the buffer."""
        return self._begin(EditKind.RENAME)

    def begin_copy(self) -> bool:
        """Enter copy mode for the selected entry; the buffer stays empty."""
        return self._begin(EditKind.COPY)

    def set_edit_mode(self, mode: EditMode) -> bool:
        """Accept only the transition back to ``NORMAL``.

        Editing is entered exclusively via ``begin_rename``/``begin_copy``.
        """
        if mode != NORMAL:
            return False
        self.edit_mode = NORMAL
        self.text_input = TextInput()
        return True

    def cancel_edit(self) -> bool:
        if not self.edit_mode.is_editing:
            return False
        return self.set_edit_mode(NORMAL)

    def submit_rename(self) -> RenameError | None:
        """Apply the buffer as the new name, then return to normal and reload.

        The mode exit, selection reset and reload happen whether or not the
        rename succeeded; a failure is returned, never raised.
        """
        mode = self.edit_mode
        if not isinstance(mode, EditingMode) or mode.kind is not EditKind.RENAME:
            return None

        error: RenameError | None = None
        try:
            self.renamer(mode.target, self.text_input.value)
        except RenameError as exc:
            LOGGER.warning("%s", exc)
            error = exc

        self.set_edit_mode(NORMAL)
        self.selection_index = 0 if self.entries else None
        self.reload()
        return error

    # -- text buffer -----------------------------------------------------

    def insert_text(self, text: str) -> bool:
        if not is_renaming(self.edit_mode):
            return False
        return self.text_input.insert(text)

    def delete_back(self) -> bool:
        if not is_renaming(self.edit_mode):
            return False
        return self.text_input.delete_back()

    def delete_forward(self) -> bool:
        if not is_renaming(self.edit_mode):
            return False
        return self.text_input.delete_forward()

    def clear_text(self) -> bool:
        if not is_renaming(self.edit_mode):
            return False
        return self.text_input.clear()

    def move_text_cursor(self, move: CursorMove) -> bool:
        if not is_renaming(self.edit_mode):
            return False
        if move is CursorMove.LEFT:
            return self.text_input.move_left()
        if move is CursorMove.RIGHT:
            return self.text_input.move_right()
        if move is CursorMove.HOME:
            return self.text_input.move_home()
        return self.text_input.move_end()

    def snapshot(self) -> PanelSnapshot:
        return PanelSnapshot(
            current_directory=self.current_directory,
            entries=self.entries,
            selection_index=self.selection_index if self.entries else None,
            edit_mode=self.edit_mode,
            text=self.text_input.value,
            text_cursor=self.text_input.cursor,
        )
