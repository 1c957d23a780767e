"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the panel tables, title bars and edit box.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    divider: str
    title: str
    panel_active: str
    panel_inactive: str
    header: str
    entry_dir: str
    entry_file: str
    entry_meta: str
    selected: str
    mode_normal: str
    mode_edit: str
    status: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    title="\033[1;32m",
    panel_active="\033[1;33m",
    panel_inactive="\033[2;38;5;250m",
    header="\033[1;38;5;81m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_meta="\033[38;5;109m",
    selected="\033[1;38;5;16;48;5;33m",
    mode_normal="\033[1;35m",
    mode_edit="\033[33m",
    status="\033[7m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    panel_active="\033[1;38;5;45m",
    panel_inactive="\033[2;38;5;110m",
    header="\033[1;38;5;117m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_meta="\033[38;5;73m",
    selected="\033[1;38;5;16;48;5;39m",
    mode_normal="\033[1;38;5;39m",
    mode_edit="\033[38;5;153m",
    status="\033[7;38;5;31m",
    hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    divider="",
    title="",
    panel_active="",
    panel_inactive="",
    header="",
    entry_dir="",
    entry_file="",
    entry_meta="",
    selected="",
    mode_normal="",
    mode_edit="",
    status="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
