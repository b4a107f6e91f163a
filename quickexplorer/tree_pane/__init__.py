"""View-facing projection of navigation state into display rows."""

from __future__ import annotations

from .projector import ViewProjector
from .rows import EntryRow, Row, RowCommand, UpRow

__all__ = [
    "EntryRow",
    "Row",
    "RowCommand",
    "UpRow",
    "ViewProjector",
]
