"""Host-invokable explorer commands.

Navigation commands mutate ``NavigationState`` (which signals the view) and then
hand the updated title to the host so breadcrumbs stay in sync. Opening a file
is delegated to the host through ``on_open_file``; nothing here reads file contents.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..file_tree_model import directory_exists
from ..host import Notifier
from ..sort_order import SortOrder, sort_order_label
from .navigation import NavigationResult, NavigationState

CHANGE_DIRECTORY = "quickExplorer.changeDirectory"
REFRESH = "quickExplorer.refresh"
GO_UP = "quickExplorer.goUp"
TOGGLE_SORT_ORDER = "quickExplorer.toggleSortOrder"
OPEN_FILE = "quickExplorer.open"

TitleListener = Callable[[str], None]
OpenFileHandler = Callable[[Path], None]


class ExplorerCommands:
    def __init__(
        self,
        state: NavigationState,
        notifier: Notifier,
        on_title_changed: TitleListener | None = None,
        on_open_file: OpenFileHandler | None = None,
    ) -> None:
        self.state = state
        self.notifier = notifier
        self.on_title_changed = on_title_changed
        self.on_open_file = on_open_file

    def title(self) -> str:
        return f"{self.state.relative_display_path()} · {sort_order_label(self.state.sort_order)}"

    def _publish_title(self) -> None:
        if self.on_title_changed is not None:
            self.on_title_changed(self.title())

    def change_directory(self, path: Path | str) -> NavigationResult:
        result = self.state.navigate(path)
        self._publish_title()
        return result

    def refresh(self) -> None:
        self.state.refresh()
        self.notifier.info("Quick Explorer refreshed")
        self._publish_title()

    def go_up(self) -> NavigationResult:
        result = self.state.go_up()
        self._publish_title()
        return result

    def toggle_sort_order(self) -> SortOrder:
        sort_order = self.state.toggle_sort_order()
        self._publish_title()
        return sort_order

    def open_file(self, path: Path | str) -> bool:
        """Hand ``path`` to the host's file opener; directories and missing paths are refused."""
        target = Path(path)
        if directory_exists(target) or not target.exists():
            self.notifier.warning(f"Not a file: {target}")
            return False
        if self.on_open_file is None:
            self.notifier.info(f"No file opener configured for: {target}")
            return False
        self.on_open_file(target)
        return True

    def registry(self) -> dict[str, Callable[..., object]]:
        """Map host command ids to their handlers."""
        return {
            CHANGE_DIRECTORY: self.change_directory,
            REFRESH: self.refresh,
            GO_UP: self.go_up,
            TOGGLE_SORT_ORDER: self.toggle_sort_order,
            OPEN_FILE: self.open_file,
        }


__all__ = [
    "CHANGE_DIRECTORY",
    "GO_UP",
    "OPEN_FILE",
    "REFRESH",
    "TOGGLE_SORT_ORDER",
    "ExplorerCommands",
]
