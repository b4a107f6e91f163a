"""Public package surface for quickexplorer.

Exports ``main`` for programmatic CLI invocation.
The listing core lives in ``file_tree_model``, ``runtime`` and ``tree_pane``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
