"""Two-panel browser that routes commands to the active panel.

The main panel is the normal browsing context; the secondary panel is the
copy-destination picker shown while a panel is in copy mode.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .commands import Command, CommandKind, CursorMove
from .edit_mode import EditingMode, EditKind, is_copying, is_renaming
from .errors import WalkerError
from .panel import Direction, Panel

LOGGER = logging.getLogger(__name__)


class PanelKind(Enum):
    MAIN = "main"
    SECONDARY = "secondary"


@dataclass
class Browser:
    main: Panel = field(default_factory=Panel)
    secondary: Panel = field(default_factory=Panel)
    active_panel: PanelKind = PanelKind.MAIN
    status_message: str = ""

    def panel(self, kind: PanelKind) -> Panel:
        if kind is PanelKind.MAIN:
            return self.main
        return self.secondary

    @property
    def active(self) -> Panel:
        return self.panel(self.active_panel)

    @property
    def inactive_panel(self) -> PanelKind:
        return PanelKind.SECONDARY if self.active_panel is PanelKind.MAIN else PanelKind.MAIN

    @property
    def dual_panel_visible(self) -> bool:
        return is_copying(self.main.edit_mode) or is_copying(self.secondary.edit_mode)

    def set_directory(self, path: Path | str) -> WalkerError | None:
        return self._report(self.active.set_directory(path))

    def open_directory(self, path: Path | str) -> WalkerError | None:
        """Load ``path`` into both panels so either one can be browsed at once."""
        error = self.main.set_directory(path)
        if error is None and self.main.current_directory is not None:
            error = self.secondary.set_directory(self.main.current_directory)
        return self._report(error)

    def switch_panel(self) -> None:
        self.active_panel = self.inactive_panel

    def begin_copy(self) -> bool:
        """Enter copy mode on the active panel and prepare the other panel.

        The destination panel starts in the source panel's directory the
        first time it is shown.
        """
        source = self.active
        if not source.begin_copy():
            return False
        destination = self.panel(self.inactive_panel)
        if destination.current_directory is None and source.current_directory is not None:
            self._report(destination.set_directory(source.current_directory))
        return True

    def cancel_edit(self) -> bool:
        changed = self.active.cancel_edit()
        if self.active_panel is PanelKind.SECONDARY and is_copying(self.main.edit_mode):
            self.main.cancel_edit()
            self.active_panel = PanelKind.MAIN
            changed = True
        return changed

    def submit_edit(self) -> bool:
        panel = self.active
        if is_renaming(panel.edit_mode):
            self._report(panel.submit_rename())
            return True
        return False

    def _report(self, error: WalkerError | None) -> WalkerError | None:
        if error is not None:
            self.status_message = str(error)
        return error

    def dispatch(self, command: Command) -> bool:
        """Apply ``command`` to the active panel; return ``True`` to quit."""
        kind = command.kind
        panel = self.active
        LOGGER.debug("dispatch %s to %s panel", kind.value, self.active_panel.value)

        if kind is CommandKind.QUIT:
            return True
        if kind is CommandKind.MOVE_UP:
            panel.move_selection(Direction.UP)
        elif kind is CommandKind.MOVE_DOWN:
            panel.move_selection(Direction.DOWN)
        elif kind is CommandKind.ENTER_CHILD:
            self._report(panel.enter_selected_directory())
        elif kind is CommandKind.GO_TO_PARENT:
            self._report(panel.go_to_parent())
        elif kind is CommandKind.BEGIN_RENAME:
            panel.begin_rename()
        elif kind is CommandKind.BEGIN_COPY:
            self.begin_copy()
        elif kind is CommandKind.TEXT_INSERT:
            panel.insert_text(command.text)
        elif kind is CommandKind.TEXT_DELETE_BACK:
            panel.delete_back()
        elif kind is CommandKind.TEXT_DELETE_FORWARD:
            panel.delete_forward()
        elif kind is CommandKind.TEXT_CLEAR:
            panel.clear_text()
        elif kind is CommandKind.TEXT_CURSOR_MOVE:
            panel.move_text_cursor(command.cursor_move or CursorMove.END)
        elif kind is CommandKind.SUBMIT_EDIT:
            self.submit_edit()
        elif kind is CommandKind.CANCEL_EDIT:
            self.cancel_edit()
        elif kind is CommandKind.SWITCH_PANEL:
            self.switch_panel()
        return False

    def edit_kind(self) -> EditKind | None:
        """Return the active panel's edit kind, or ``None`` in normal mode."""
        mode = self.active.edit_mode
        return mode.kind if isinstance(mode, EditingMode) else None
