# src/lstree/core/summary.py
from __future__ import annotations


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_summary(directories: int, files: int) -> str:
    """
    Summary line printed after the tree.
    Example:
      format_summary(1, 2) -> '1 directory, 2 files'
    """
    return f"{_plural(directories, 'directory', 'directories')}, {_plural(files, 'file', 'files')}"
