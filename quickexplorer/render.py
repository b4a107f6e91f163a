"""Plain-text rendering of explorer rows for the terminal host."""

from __future__ import annotations

from collections.abc import Iterable

from .tree_pane import Row, UpRow
from .ui_theme import UITheme

DIR_MARKER = "▸ "
FILE_MARKER = "  "
PARENT_MARKER = "↑ "


def format_row(row: Row, theme: UITheme) -> str:
    if isinstance(row, UpRow):
        return f"{theme.row_parent}{PARENT_MARKER}{row.label}{theme.reset}"
    if row.is_dir:
        return f"{theme.row_dir}{DIR_MARKER}{row.label}/{theme.reset}"
    return f"{theme.row_file}{FILE_MARKER}{row.label}{theme.reset}"


def format_title(title: str, theme: UITheme) -> str:
    return f"{theme.title}{title}{theme.reset}"


def format_notice(level: str, message: str, theme: UITheme) -> str:
    color = {
        "info": theme.notice_info,
        "warning": theme.notice_warning,
        "error": theme.notice_error,
    }.get(level, "")
    return f"{color}[{level}] {message}{theme.reset}"


def render_listing(title: str, rows: Iterable[Row], theme: UITheme) -> str:
    """Return the title line plus one line per row, newline-terminated."""
    lines = [format_title(title, theme)]
    rendered_rows = [format_row(row, theme) for row in rows]
    if not rendered_rows:
        rendered_rows = [f"{theme.row_hint}  (empty){theme.reset}"]
    lines.extend(rendered_rows)
    return "\n".join(lines) + "\n"


__all__ = [
    "format_notice",
    "format_row",
    "format_title",
    "render_listing",
]
