"""Pure path helpers for the navigation boundary and display paths.

Nothing here touches the filesystem: no symlink resolution, no case folding.
"""

from __future__ import annotations

import os
from pathlib import Path


def parent_of(path: Path | str) -> Path:
    """Return the platform-native directory containing ``path``."""
    return Path(os.path.dirname(os.fspath(path)))


def is_filesystem_root(path: Path | str) -> bool:
    """Return whether ``path`` is its own parent (top of the filesystem)."""
    return parent_of(path) == Path(path)


def _canonical(path: Path | str) -> str:
    return os.fspath(path).replace("\\", "/")


def is_within(path: Path | str, root: Path | str) -> bool:
    """Return whether ``path`` equals ``root`` or lies below it.

    Comparison is textual after normalizing separators to ``/``, so
    ``/a/bc`` is not within ``/a/b``.
    """
    candidate = _canonical(path)
    boundary = _canonical(root)
    if candidate == boundary:
        return True
    prefix = boundary if boundary.endswith("/") else boundary + "/"
    return candidate.startswith(prefix)


def relative_to(base: Path | str, path: Path | str) -> str:
    """Return ``path`` relative to ``base``; ``"."`` when they are the same.

    Paths with no relative form (different Windows drives) come back as-is.
    """
    try:
        relative = os.path.relpath(os.fspath(path), os.fspath(base))
    except ValueError:
        return os.fspath(path)
    return relative or "."


__all__ = [
    "parent_of",
    "is_filesystem_root",
    "is_within",
    "relative_to",
]
