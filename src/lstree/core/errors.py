# src/lstree/core/errors.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union


class TreeError(Exception):
    """Base class for everything the renderer reports about a path."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class EmptyPath(TreeError):
    def __init__(self):
        super().__init__("Path is empty!", path="")


class PathNotFound(TreeError):
    def __init__(self, path: Union[str, Path]):
        super().__init__(f"'{path}' is neither a file nor a directory", path=path)


class InvalidLevelState(TreeError):
    """Padding was requested for a depth whose ancestor chain was never set."""


class EnumerationError(TreeError):
    def __init__(self, path: Union[str, Path], cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot list '{path}': {reason}", path=path)
        self.cause = cause
