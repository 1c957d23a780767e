"""Key-token to command tables for normal, rename and copy modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .commands import Command, CommandKind, CursorMove
from .edit_mode import EditKind


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command."""

    combos: tuple[str, ...]
    command: Command


class KeyMap:
    """Small key-dispatch table with optional fallback for unbound keys."""

    def __init__(self, fallback: Callable[[str], Command | None] | None = None) -> None:
        self._commands: dict[str, Command] = {}
        self._fallback = fallback

    def register_binding(self, binding: KeyBinding) -> KeyMap:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[combo] = binding.command
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyMap:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Command | None:
        command = self._commands.get(key)
        if command is not None:
            return command
        if self._fallback is None:
            return None
        return self._fallback(key)


def _bind(kind: CommandKind, *combos: str) -> KeyBinding:
    return KeyBinding(combos=combos, command=Command.of(kind))


def _printable_insert(key: str) -> Command | None:
    if len(key) == 1 and key.isprintable():
        return Command.insert(key)
    return None


_NAVIGATION_BINDINGS: tuple[KeyBinding, ...] = (
    _bind(CommandKind.MOVE_DOWN, "j", "DOWN"),
    _bind(CommandKind.MOVE_UP, "k", "UP"),
    _bind(CommandKind.ENTER_CHILD, "l", "RIGHT"),
    _bind(CommandKind.GO_TO_PARENT, "h", "LEFT", "BACKSPACE"),
    _bind(CommandKind.SWITCH_PANEL, "TAB"),
    _bind(CommandKind.CANCEL_EDIT, "ESC"),
    _bind(CommandKind.QUIT, "q"),
)


def build_normal_keymap() -> KeyMap:
    return KeyMap().register_bindings(
        *_NAVIGATION_BINDINGS,
        _bind(CommandKind.ENTER_CHILD, "ENTER"),
        _bind(CommandKind.BEGIN_RENAME, "r"),
        _bind(CommandKind.BEGIN_COPY, "y"),
    )


def build_copy_keymap() -> KeyMap:
    return KeyMap().register_bindings(*_NAVIGATION_BINDINGS)


def build_rename_keymap() -> KeyMap:
    return KeyMap(fallback=_printable_insert).register_bindings(
        _bind(CommandKind.SUBMIT_EDIT, "ENTER"),
        _bind(CommandKind.CANCEL_EDIT, "ESC"),
        _bind(CommandKind.TEXT_DELETE_BACK, "BACKSPACE"),
        _bind(CommandKind.TEXT_DELETE_FORWARD, "DELETE", "CTRL_D"),
        _bind(CommandKind.TEXT_CLEAR, "CTRL_U"),
        KeyBinding(("LEFT",), Command.cursor(CursorMove.LEFT)),
        KeyBinding(("RIGHT",), Command.cursor(CursorMove.RIGHT)),
        KeyBinding(("HOME", "CTRL_A"), Command.cursor(CursorMove.HOME)),
        KeyBinding(("END", "CTRL_E"), Command.cursor(CursorMove.END)),
    )


class ModalKeyMaps:
    """Pick the key table matching the active panel's edit kind."""

    def __init__(self) -> None:
        self.normal = build_normal_keymap()
        self.rename = build_rename_keymap()
        self.copy = build_copy_keymap()

    def command_for(self, key: str, edit_kind: EditKind | None) -> Command | None:
        if edit_kind is EditKind.RENAME:
            return self.rename.lookup(key)
        if edit_kind is EditKind.COPY:
            return self.copy.lookup(key)
        return self.normal.lookup(key)
