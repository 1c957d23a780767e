"""Decoded commands accepted by ``Browser.dispatch``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER_CHILD = "enter_child"
    GO_TO_PARENT = "go_to_parent"
    BEGIN_RENAME = "begin_rename"
    BEGIN_COPY = "begin_copy"
    TEXT_INSERT = "text_insert"
    TEXT_DELETE_BACK = "text_delete_back"
    TEXT_DELETE_FORWARD = "text_delete_forward"
    TEXT_CURSOR_MOVE = "text_cursor_move"
    TEXT_CLEAR = "text_clear"
    SUBMIT_EDIT = "submit_edit"
    CANCEL_EDIT = "cancel_edit"
    SWITCH_PANEL = "switch_panel"
    QUIT = "quit"


class CursorMove(Enum):
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    text: str = ""
    cursor_move: CursorMove | None = None

    @classmethod
    def of(cls, kind: CommandKind) -> Command:
        return cls(kind)

    @classmethod
    def insert(cls, text: str) -> Command:
        return cls(CommandKind.TEXT_INSERT, text=text)

    @classmethod
    def cursor(cls, move: CursorMove) -> Command:
        return cls(CommandKind.TEXT_CURSOR_MOVE, cursor_move=move)
