"""Startup directory resolution: configured path, then workspace, then home."""

from __future__ import annotations

import logging
from pathlib import Path

from ..file_tree_model import directory_exists
from ..host import ConfigStore, Notifier, WorkspaceProvider
from .config import DEFAULT_PATH_KEY

logger = logging.getLogger(__name__)


def _configured_directory(raw_value: str, base: Path) -> Path:
    """Interpret a ``defaultPath`` value; relative values hang off ``base``."""
    candidate = Path(raw_value).expanduser()
    if candidate.is_absolute():
        return candidate
    return base / candidate


def resolve_initial_directory(
    config: ConfigStore,
    workspace: WorkspaceProvider,
    notifier: Notifier,
    home: Path | None = None,
) -> Path:
    """Return the directory a new view session starts in.

    Precedence is a valid configured ``defaultPath``, then the workspace root,
    then the home directory. An invalid configured path only produces a
    warning; this function never raises.
    """
    home_directory = home if home is not None else Path.home()
    workspace_root = workspace.workspace_root()

    raw_value = config.get(DEFAULT_PATH_KEY, "").strip()
    if raw_value:
        configured = _configured_directory(raw_value, workspace_root or home_directory)
        if directory_exists(configured):
            logger.debug("initial directory from config: %s", configured)
            return configured
        notifier.warning(f"Configured default path is not a valid directory: {raw_value}")

    if workspace_root is not None:
        logger.debug("initial directory from workspace: %s", workspace_root)
        return workspace_root

    logger.debug("initial directory falls back to home: %s", home_directory)
    return home_directory


__all__ = ["resolve_initial_directory"]
