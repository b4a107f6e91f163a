"""Project navigation state into display rows for a host view."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..file_tree_model import FileSystemError, list_directory
from ..host import Notifier
from ..paths import parent_of
from ..runtime.navigation import NavigationState
from .rows import EntryRow, Row, UpRow

logger = logging.getLogger(__name__)


class ViewProjector:
    """Host-facing data provider for the flat directory view.

    Hosts call ``get_children()`` for the top level, ``get_item(row)`` per row
    and subscribe through ``on_did_change`` to learn when to ask again.
    Listing failures stop here: they are logged, reported once through the
    notifier and turned into an empty listing.
    """

    def __init__(self, state: NavigationState, notifier: Notifier) -> None:
        self.state = state
        self.notifier = notifier

    def rows(self) -> list[Row]:
        state = self.state
        rows: list[Row] = []
        if not state.is_at_project_root:
            rows.append(UpRow.for_parent(parent_of(state.current_directory), state.project_root))

        try:
            entries = list_directory(state.current_directory, state.sort_order)
        except FileSystemError as exc:
            logger.exception("failed to list %s", exc.path)
            self.notifier.error(str(exc))
            return []

        rows.extend(EntryRow.from_entry(entry, state.project_root) for entry in entries)
        return rows

    def get_children(self, element: Row | None = None) -> list[Row]:
        if element is not None:
            return []
        return self.rows()

    def get_item(self, element: Row) -> Row:
        return element

    def on_did_change(self, listener: Callable[[], None]) -> Callable[[], None]:
        return self.state.on_did_change(listener)


__all__ = ["ViewProjector"]
