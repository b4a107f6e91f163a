"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the terminal listing: title bar, rows, and
notification lines.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    row_dir: str
    row_file: str
    row_parent: str
    row_hint: str
    notice_info: str
    notice_warning: str
    notice_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    row_dir="\033[1;34m",
    row_file="\033[38;5;252m",
    row_parent="\033[38;5;44m",
    row_hint="\033[2;38;5;250m",
    notice_info="\033[38;5;109m",
    notice_warning="\033[38;5;214m",
    notice_error="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    row_dir="\033[1;38;5;45m",
    row_file="\033[38;5;252m",
    row_parent="\033[38;5;39m",
    row_hint="\033[2;38;5;110m",
    notice_info="\033[38;5;73m",
    notice_warning="\033[38;5;215m",
    notice_error="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    row_dir="",
    row_file="",
    row_parent="",
    row_hint="",
    notice_info="",
    notice_warning="",
    notice_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    candidate = str(name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
