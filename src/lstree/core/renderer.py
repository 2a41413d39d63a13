#!/usr/bin/env python3
"""
renderer.py — recursive hierarchy rendering

Walks a directory depth-first and emits one formatted line per entry:

  docs/
  ├───a.txt
  └───sub/
      └───b.txt

What this does
--------------
• Validates the starting path (empty / missing → error, single file → one line)
• Lists each directory's children, drops ignored names, optionally sorts them
• Records ITERATING / NOT_ITERATING for every child *before* rendering it, so
  the child's connector and all of its descendants' margins are known
• Counts directories and files as they are classified
• A directory that cannot be listed is still shown; its contents are skipped,
  the error is logged and recorded, and the walk moves on to its siblings
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

import click

from .errors import EmptyPath, EnumerationError, PathNotFound, TreeError
from .level_state import LevelState, LevelStateTable, state_for_position
from .padding import entry_lines
from ..utils.io_paths import (
    DirectoryEntry,
    EntryKind,
    classify,
    filter_ignored,
    list_children,
    printable,
    sort_entries,
)
from ..utils.log import get_logger

log = get_logger(__name__)

DIR_SUFFIX = "/"

Writer = Callable[[str], None]


@dataclass
class RenderCounters:
    directories: int = 0
    files: int = 0
    errors: List[TreeError] = field(default_factory=list)

    @property
    def totals(self) -> Tuple[int, int]:
        return self.directories, self.files


@dataclass(frozen=True)
class RenderOptions:
    x_spacing: int = 3
    y_spacing: int = 1
    sort_entries: bool = True
    ignore_names: Tuple[str, ...] = ()
    count_root: bool = False

    def __post_init__(self):
        if self.x_spacing < 0 or self.y_spacing < 0:
            raise ValueError("spacing must be >= 0")


def _as_directory_name(name: str) -> str:
    return name if name.endswith(DIR_SUFFIX) else name + DIR_SUFFIX


class HierarchyRenderer:
    """One walk over one tree. Create a new renderer for every run."""

    def __init__(self, options: Optional[RenderOptions] = None, write: Optional[Writer] = None):
        self.options = options or RenderOptions()
        self._write = write or click.echo
        self._lines_emitted = 0
        self.counters = RenderCounters()

    # ---------------- output ----------------

    def _emit(self, name: str, levels: LevelStateTable, depth: int) -> None:
        rows = entry_lines(
            printable(name),
            levels,
            depth,
            self.options.x_spacing,
            self.options.y_spacing,
            first_line=self._lines_emitted == 0,
        )
        for row in rows:
            self._write(row)
        self._lines_emitted += len(rows)

    def _report(self, err: TreeError) -> None:
        log.error("%s", printable(str(err)))
        self.counters.errors.append(err)

    # ---------------- traversal ----------------

    def _still_there(self, entry: DirectoryEntry) -> bool:
        """Directories that vanished since listing are reported, not shown."""
        if entry.kind is not EntryKind.DIRECTORY or classify(entry.path) is EntryKind.DIRECTORY:
            return True
        self._report(PathNotFound(entry.path))
        return False

    def _children(self, directory: Path) -> List[DirectoryEntry]:
        try:
            entries = list_children(directory)
        except OSError as exc:
            raise EnumerationError(directory, exc) from exc
        entries = filter_ignored(entries, self.options.ignore_names)
        entries = [e for e in entries if self._still_there(e)]
        if self.options.sort_entries:
            entries = sort_entries(entries)
        return entries

    def _render_directory(self, path: Union[str, Path], levels: LevelStateTable, depth: int) -> None:
        directory = Path(path)
        if depth == 0:
            display = _as_directory_name(str(path))
        else:
            display = _as_directory_name(directory.name)

        try:
            children = self._children(directory)
        except EnumerationError as err:
            # keep the entry so its siblings' connectors still line up
            self._emit(display, levels, depth)
            self._report(err)
            return

        self._emit(display, levels, depth)

        depth += 1
        count = len(children)
        for index, child in enumerate(children):
            child_levels = levels.set(depth, state_for_position(index, count))
            if child.kind is EntryKind.FILE:
                self.counters.files += 1
                self._emit(child.name, child_levels, depth)
                continue
            try:
                if classify(child.path) is not EntryKind.DIRECTORY:
                    raise PathNotFound(child.path)
                self.counters.directories += 1
                self._render_directory(child.path, child_levels, depth)
            except TreeError as err:
                self._report(err)

    def render(self, path: Union[str, Path], depth: int = 0,
               levels: Optional[LevelStateTable] = None) -> RenderCounters:
        """
        Render `path` and everything below it. Errors about the starting path
        itself (EmptyPath, PathNotFound) are raised before anything is written;
        errors further down are reported and skipped.
        """
        if path is None or str(path) == "":
            raise EmptyPath()
        kind = classify(path)
        if kind not in (EntryKind.FILE, EntryKind.DIRECTORY):
            raise PathNotFound(path)

        if levels is None:
            levels = LevelStateTable.root()
        # fail fast if the caller's ancestor chain does not reach `depth`
        levels.get(depth)

        if kind is EntryKind.FILE:
            name = str(path) if depth == 0 else Path(path).name
            self.counters.files += 1
            self._emit(name, levels, depth)
            return self.counters

        if depth == 0 and self.options.count_root:
            self.counters.directories += 1
        log.debug("rendering %s (depth=%d, %s)", path, depth, self.options)
        self._render_directory(path, levels, depth)
        return self.counters


def render(
    path: Union[str, Path],
    x_spacing: int = 3,
    y_spacing: int = 1,
    depth: int = 0,
    sort_entries: bool = True,
    ignore_names: Iterable[str] = (),
    *,
    levels: Optional[LevelStateTable] = None,
    count_root: bool = False,
    write: Optional[Writer] = None,
) -> RenderCounters:
    """Convenience wrapper: build a HierarchyRenderer for one run and render `path`."""
    options = RenderOptions(
        x_spacing=x_spacing,
        y_spacing=y_spacing,
        sort_entries=sort_entries,
        ignore_names=tuple(ignore_names),
        count_root=count_root,
    )
    return HierarchyRenderer(options, write=write).render(path, depth=depth, levels=levels)


def render_lines(path: Union[str, Path], **kwargs) -> Tuple[List[str], RenderCounters]:
    """Render into a list instead of stdout. Returns (lines, counters)."""
    lines: List[str] = []
    counters = render(path, write=lines.append, **kwargs)
    return lines, counters


__all__ = [
    "HierarchyRenderer",
    "LevelState",
    "RenderCounters",
    "RenderOptions",
    "render",
    "render_lines",
]
