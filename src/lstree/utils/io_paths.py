"""
io_paths.py â Filesystem helpers the renderer builds on
Used by:
  â¢ core/renderer.py  (classify, list_children, filter_ignored, sort_entries)
  â¢ cli/commands.py   (write_lines for --output)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import os
from typing import Iterable, List, Union

from .log import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]

# ------------------------------------------------------------
# Entry classification
# ------------------------------------------------------------

class EntryKind(str, Enum):
    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"          # exists, but is neither (fifo, socket, device, ...)


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind
    path: Path

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def classify(path: PathLike) -> EntryKind:
    """Classify a path, following symlinks. Unreadable paths count as missing."""
    p = Path(path)
    try:
        if p.is_dir():
            return EntryKind.DIRECTORY
        if p.is_file():
            return EntryKind.FILE
        if p.exists():
            return EntryKind.OTHER
    except OSError:
        pass
    return EntryKind.MISSING

# ------------------------------------------------------------
# Directory listing
# ------------------------------------------------------------

def _entry_kind(entry: os.DirEntry) -> EntryKind:
    try:
        if entry.is_dir():
            return EntryKind.DIRECTORY
        if entry.is_file():
            return EntryKind.FILE
    except OSError:
        return EntryKind.MISSING
    return EntryKind.OTHER


def list_children(directory: PathLike) -> List[DirectoryEntry]:
    """
    Immediate children of `directory` as (name, kind, path), in the order the
    OS returns them. Children that are neither files nor directories (broken
    symlinks, sockets, ...) are left out.
    Raises OSError when the directory cannot be listed.
    """
    children: List[DirectoryEntry] = []
    with os.scandir(directory) as it:
        for entry in it:
            kind = _entry_kind(entry)
            if kind not in (EntryKind.FILE, EntryKind.DIRECTORY):
                log.debug("skipping %s (%s)", entry.path, kind.value)
                continue
            children.append(DirectoryEntry(entry.name, kind, Path(entry.path)))
    return children


def filter_ignored(entries: Iterable[DirectoryEntry], ignore_names: Iterable[str]) -> List[DirectoryEntry]:
    """Drop entries whose name equals one of `ignore_names` (exact match, no globbing)."""
    ignored = set(ignore_names)
    return [e for e in entries if e.name not in ignored]


def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    """Order by name in codepoint order: ['b', 'a', 'C'] -> ['C', 'a', 'b']."""
    return sorted(entries, key=lambda e: e.name)

# ------------------------------------------------------------
# Display text
# ------------------------------------------------------------

def printable(text: str) -> str:
    """
    Names that are not valid UTF-8 come back from os.scandir with surrogate
    escapes, which no UTF-8 stream will accept. Swap the bad bytes for U+FFFD,
    so a file named with the raw bytes 'bad', 0xFF, '.txt' prints as 'bad�.txt'.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates that were not produced by surrogateescape
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")

# ------------------------------------------------------------
# Output file
# ------------------------------------------------------------

def write_lines(lines: Iterable[str], path: PathLike) -> Path:
    """Write lines to a UTF-8 text file (one per line), creating parent dirs."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(printable(line) for line in lines) + "\n", encoding="utf-8")
    return out
