"""Filesystem scanning and folder-first ordering for directory listings."""

from __future__ import annotations

import locale
import os
from collections.abc import Iterable
from pathlib import Path

from ..sort_order import SortOrder
from .types import DirectoryEntry


class FileSystemError(OSError):
    """A directory could not be listed.

    Carries the offending ``path`` and the underlying ``cause`` so callers can
    show both to the user.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to read directory: {path}. {reason}")
        self.errno = cause.errno
        self.path = path
        self.cause = cause


def directory_exists(path: Path | str) -> bool:
    """Return whether ``path`` is an existing directory; never raises."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def _child_is_dir(child: os.DirEntry) -> bool:
    try:
        return child.is_dir()
    except OSError:
        return False


def _child_mtime_ns(child: os.DirEntry) -> int | None:
    try:
        return int(child.stat().st_mtime_ns)
    except OSError:
        return None


def _name_key(entry: DirectoryEntry) -> str:
    return locale.strxfrm(entry.name)


def _mtime_key(entry: DirectoryEntry) -> int:
    return entry.mtime_ns if entry.mtime_ns is not None else -1


def sort_entries(entries: Iterable[DirectoryEntry], sort_order: SortOrder) -> list[DirectoryEntry]:
    """Order entries folder-first, then by name or modification time.

    Each partition is sorted separately so ``reverse`` never moves files ahead
    of directories. Python's sort stays stable under ``reverse=True``, so equal
    keys keep their input order in every variant.
    """
    directories: list[DirectoryEntry] = []
    files: list[DirectoryEntry] = []
    for entry in entries:
        (directories if entry.is_dir else files).append(entry)

    key = _mtime_key if sort_order.by_modified_time else _name_key
    directories.sort(key=key, reverse=sort_order.descending)
    files.sort(key=key, reverse=sort_order.descending)
    return directories + files


def list_directory(
    directory: Path | str,
    sort_order: SortOrder = SortOrder.FOLDER_FIRST_NAME_ASC,
) -> list[DirectoryEntry]:
    """List the direct children of ``directory`` in ``sort_order``.

    Symlinks are classified by their target, as ``stat`` would. Raises
    ``FileSystemError`` when the directory is missing or unreadable.
    """
    directory = Path(directory)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                entries.append(
                    DirectoryEntry(
                        name=child.name,
                        path=directory / child.name,
                        is_dir=_child_is_dir(child),
                        mtime_ns=_child_mtime_ns(child),
                    )
                )
    except OSError as exc:
        raise FileSystemError(directory, exc) from exc

    return sort_entries(entries, sort_order)


__all__ = [
    "FileSystemError",
    "directory_exists",
    "sort_entries",
    "list_directory",
]
