"""Display rows produced for the flat explorer listing.

Rows are plain values: label, tooltip, icon id, context value and the command a
host should run on activation. No rendering toolkit types appear here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import DirectoryEntry
from ..paths import relative_to
from ..runtime.commands import CHANGE_DIRECTORY, OPEN_FILE

PARENT_LABEL = ".."


@dataclass(frozen=True)
class RowCommand:
    command: str
    title: str
    argument: Path


@dataclass(frozen=True)
class EntryRow:
    """One directory entry as shown in the view."""

    label: str
    path: Path
    is_dir: bool
    tooltip: str
    icon: str | None
    context_value: str
    command: RowCommand

    @classmethod
    def from_entry(cls, entry: DirectoryEntry, project_root: Path | None = None) -> EntryRow:
        if project_root is not None:
            tooltip = relative_to(project_root, entry.path)
        else:
            tooltip = str(entry.path)
        if entry.is_dir:
            command = RowCommand(CHANGE_DIRECTORY, "Change Directory", entry.path)
        else:
            command = RowCommand(OPEN_FILE, "Open File", entry.path)
        return cls(
            label=entry.name,
            path=entry.path,
            is_dir=entry.is_dir,
            tooltip=tooltip,
            icon="folder" if entry.is_dir else None,
            context_value="folder" if entry.is_dir else "file",
            command=command,
        )


@dataclass(frozen=True)
class UpRow:
    """Pseudo-entry that moves the view to the parent directory."""

    path: Path
    tooltip: str
    label: str = PARENT_LABEL
    icon: str = "arrow-up"
    context_value: str = "parentDirectory"
    is_dir: bool = True

    @classmethod
    def for_parent(cls, parent: Path, project_root: Path | None = None) -> UpRow:
        target = relative_to(project_root, parent) if project_root is not None else str(parent)
        return cls(path=parent, tooltip=f"Go to parent directory: {target}")

    @property
    def command(self) -> RowCommand:
        return RowCommand(CHANGE_DIRECTORY, "Go to Parent Directory", self.path)


Row = EntryRow | UpRow


__all__ = [
    "PARENT_LABEL",
    "EntryRow",
    "Row",
    "RowCommand",
    "UpRow",
]
