"""Single-line editable text buffer with a cursor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TextInput:
    value: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        self._clamp()

    @classmethod
    def with_value(cls, value: str) -> TextInput:
        """Return a buffer pre-filled with ``value`` and the cursor at the end."""
        return cls(value=value, cursor=len(value))

    def _clamp(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.value)))

    def insert(self, text: str) -> bool:
        if not text:
            return False
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)
        return True

    def delete_back(self) -> bool:
        if self.cursor <= 0:
            return False
        self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        self.cursor -= 1
        return True

    def delete_forward(self) -> bool:
        if self.cursor >= len(self.value):
            return False
        self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
        return True

    def move_left(self) -> bool:
        if self.cursor <= 0:
            return False
        self.cursor -= 1
        return True

    def move_right(self) -> bool:
        if self.cursor >= len(self.value):
            return False
        self.cursor += 1
        return True

    def move_home(self) -> bool:
        moved = self.cursor != 0
        self.cursor = 0
        return moved

    def move_end(self) -> bool:
        moved = self.cursor != len(self.value)
        self.cursor = len(self.value)
        return moved

    def clear(self) -> bool:
        changed = bool(self.value)
        self.value = ""
        self.cursor = 0
        return changed
