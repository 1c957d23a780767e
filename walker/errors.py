"""Error types raised at the filesystem boundaries.

Panel operations catch these and hand them back as return values, so the
state machine never raises for listing or rename failures.
"""

from __future__ import annotations

from pathlib import Path


class WalkerError(Exception):
    """Base class for recoverable browser errors."""


class ListingError(WalkerError):
    """Directory could not be listed: missing, not a directory, or unreadable."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot list {self.path}: {reason}")


class RenameError(WalkerError):
    """Rename request was refused or failed at the filesystem."""

    def __init__(self, source: Path | str, target: str, reason: str) -> None:
        self.source = Path(source)
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot rename {self.source.name} to {target!r}: {reason}")
