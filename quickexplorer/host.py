"""Collaborator contracts a host provides to the explorer core.

The core only needs three things from its host: the active workspace root (if
any), somewhere to send user-facing messages, and a string settings store.
Small default implementations live here for the terminal host and tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

NOTIFICATIONS_LOGGER = "quickexplorer.notifications"


class WorkspaceProvider(Protocol):
    def workspace_root(self) -> Path | None: ...


class Notifier(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConfigStore(Protocol):
    def get(self, key: str, default: str = "") -> str: ...

    def set(self, key: str, value: str) -> None: ...


class StaticWorkspace:
    """Workspace provider with a fixed (possibly absent) root."""

    def __init__(self, root: Path | str | None = None) -> None:
        self._root = Path(root) if root is not None else None

    def workspace_root(self) -> Path | None:
        return self._root


class LoggingNotifier:
    """Route user notifications to the ``quickexplorer.notifications`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(NOTIFICATIONS_LOGGER)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


class RecordingNotifier:
    """Keep ``(level, message)`` pairs in order; ``drain`` hands them off once."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def drain(self) -> list[tuple[str, str]]:
        drained, self.messages = self.messages, []
        return drained


class MemoryConfigStore:
    """In-process config store; values never leave the object."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str, default: str = "") -> str:
        value = self.values.get(key)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


__all__ = [
    "ConfigStore",
    "LoggingNotifier",
    "MemoryConfigStore",
    "Notifier",
    "RecordingNotifier",
    "StaticWorkspace",
    "WorkspaceProvider",
]
