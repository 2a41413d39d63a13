# src/lstree/utils/log.py
from __future__ import annotations

import logging
import sys
from typing import Union

LOGGER_NAME = "lstree"


class _StderrHandler(logging.StreamHandler):
    """Marker type so setup_logging() can find and replace its own handler."""


def _default_formatter() -> logging.Formatter:
    return logging.Formatter("%(name)s: %(levelname)s: %(message)s")


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    # bind to the current sys.stderr (it may have been swapped since last call)
    for h in list(root.handlers):
        if isinstance(h, _StderrHandler):
            root.removeHandler(h)
    stream = _StderrHandler(sys.stderr)
    stream.setFormatter(_default_formatter())
    root.addHandler(stream)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    if not name or not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME
    lg = logging.getLogger(name)
    lg.propagate = True
    return lg
