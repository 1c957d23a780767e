"""Edit-mode sum type for one panel.

``NORMAL`` carries nothing; ``EditingMode`` always carries the entry that was
selected when editing began, so a target can never exist outside editing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .entry import Entry


class EditKind(Enum):
    RENAME = "rename"
    COPY = "copy"


@dataclass(frozen=True)
class NormalMode:
    """No edit in progress."""

    @property
    def is_editing(self) -> bool:
        return False

    def is_kind(self, kind: EditKind) -> bool:
        return False


@dataclass(frozen=True)
class EditingMode:
    """Rename or copy edit bound to the entry captured at start."""

    kind: EditKind
    target: Entry

    @property
    def is_editing(self) -> bool:
        return True

    def is_kind(self, kind: EditKind) -> bool:
        return self.kind is kind


NORMAL = NormalMode()

EditMode = Union[NormalMode, EditingMode]


def is_renaming(mode: EditMode) -> bool:
    return mode.is_kind(EditKind.RENAME)


def is_copying(mode: EditMode) -> bool:
    return mode.is_kind(EditKind.COPY)
