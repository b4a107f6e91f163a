"""Domain model for flat directory listings.

This package contains non-UI listing primitives:
- the directory entry datatype
- filesystem scanning with folder-first sort orders
- the non-raising directory existence check
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import FileSystemError, directory_exists, list_directory, sort_entries

__all__ = [
    "DirectoryEntry",
    "FileSystemError",
    "directory_exists",
    "list_directory",
    "sort_entries",
]
