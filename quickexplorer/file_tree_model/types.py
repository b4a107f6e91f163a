"""Domain datatypes for one flat directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One direct child of a listed directory.

    ``mtime_ns`` is ``None`` when the child could not be stat'ed; such entries
    sort as the oldest under time-based orders.
    """

    name: str
    path: Path
    is_dir: bool
    mtime_ns: int | None = None

    @property
    def modified_time(self) -> datetime | None:
        if self.mtime_ns is None:
            return None
        return datetime.fromtimestamp(self.mtime_ns / 1_000_000_000)


__all__ = ["DirectoryEntry"]
