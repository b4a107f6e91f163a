"""Explorer session runtime: config, initial location, navigation and commands."""

from __future__ import annotations

from .commands import ExplorerCommands
from .initial_location import resolve_initial_directory
from .navigation import NavigationResult, NavigationState

__all__ = [
    "ExplorerCommands",
    "NavigationResult",
    "NavigationState",
    "resolve_initial_directory",
]
