"""Navigation state for one explorer view: current directory, root boundary, sort order.

This module intentionally has no UI concerns.
Mutations notify registered observers that the projected rows are stale.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from ..file_tree_model import directory_exists
from ..host import ConfigStore, Notifier, WorkspaceProvider
from ..paths import is_within, parent_of, relative_to
from ..sort_order import SortOrder, next_sort_order, sort_order_to_string, string_to_sort_order
from .config import DEFAULT_SORT_ORDER_KEY
from .initial_location import resolve_initial_directory

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class NavigationResult(Enum):
    SUCCESS = "success"
    NOOP = "noop"
    NOT_A_DIRECTORY = "not-a-directory"
    ABOVE_ROOT = "above-root"

    @property
    def changed(self) -> bool:
        return self is NavigationResult.SUCCESS


def _normalized(path: Path | str) -> Path:
    """Collapse ``..``/``.`` segments lexically so boundary checks see the real target."""
    return Path(os.path.normpath(os.fspath(path)))


class NavigationState:
    """Current directory within an immutable project-root boundary.

    ``current_directory`` is always ``project_root`` or one of its
    descendants; every rejected navigation leaves it untouched.
    """

    def __init__(
        self,
        project_root: Path | str,
        *,
        config: ConfigStore,
        notifier: Notifier,
        workspace_root: Path | str | None = None,
        sort_order: SortOrder | None = None,
    ) -> None:
        root = _normalized(project_root)
        self._project_root = root
        self._current_directory = root
        self._workspace_root = _normalized(workspace_root) if workspace_root is not None else None
        self._config = config
        self._notifier = notifier
        if sort_order is None:
            default_value = sort_order_to_string(SortOrder.default())
            sort_order = string_to_sort_order(config.get(DEFAULT_SORT_ORDER_KEY, default_value))
        self._sort_order = sort_order
        self._listeners: list[ChangeListener] = []

    @classmethod
    def create(
        cls,
        config: ConfigStore,
        workspace: WorkspaceProvider,
        notifier: Notifier,
        home: Path | None = None,
        sort_order: SortOrder | None = None,
    ) -> NavigationState:
        """Start a session in the resolved initial directory.

        ``sort_order`` overrides the configured order for this session only.
        """
        initial = resolve_initial_directory(config, workspace, notifier, home=home)
        return cls(
            initial,
            config=config,
            notifier=notifier,
            workspace_root=workspace.workspace_root(),
            sort_order=sort_order,
        )

    @property
    def current_directory(self) -> Path:
        return self._current_directory

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def workspace_root(self) -> Path | None:
        return self._workspace_root

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def is_at_project_root(self) -> bool:
        return self._current_directory == self._project_root

    def on_did_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener`` for stale-view signals; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> None:
        """Signal observers without changing any state."""
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("view change listener failed")

    def navigate(self, target: Path | str) -> NavigationResult:
        """Make ``target`` the current directory if it is a directory within the root."""
        target_path = _normalized(target)
        if not directory_exists(target_path):
            self._notifier.warning(f"Not a directory: {target_path}")
            return NavigationResult.NOT_A_DIRECTORY
        if not is_within(target_path, self._project_root):
            self._notifier.info("Cannot navigate above project root")
            return NavigationResult.ABOVE_ROOT

        logger.debug("navigate %s -> %s", self._current_directory, target_path)
        self._current_directory = target_path
        self.refresh()
        return NavigationResult.SUCCESS

    def go_up(self) -> NavigationResult:
        """Move to the parent directory; a no-op with a message at the project root."""
        if self.is_at_project_root:
            self._notifier.info("Already at project root")
            return NavigationResult.NOOP
        return self.navigate(parent_of(self._current_directory))

    def toggle_sort_order(self) -> SortOrder:
        """Advance to the next sort order, persist it, and signal observers."""
        self._sort_order = next_sort_order(self._sort_order)
        self._config.set(DEFAULT_SORT_ORDER_KEY, sort_order_to_string(self._sort_order))
        logger.debug("sort order -> %s", self._sort_order.value)
        self.refresh()
        return self._sort_order

    def relative_display_path(self) -> str:
        """Current directory relative to the workspace root, else the project root."""
        base = self._workspace_root if self._workspace_root is not None else self._project_root
        return relative_to(base, self._current_directory)


__all__ = ["NavigationResult", "NavigationState"]
