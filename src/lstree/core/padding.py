# src/lstree/core/padding.py
from __future__ import annotations
from typing import List

from .level_state import LevelState, LevelStateTable

VERTICAL_BAR = "│"
BRANCH = "├"
LAST_BRANCH = "└"
HORIZONTAL_RULE = "─"


def connector_glyph(state: LevelState) -> str:
    if state is LevelState.ITERATING:
        return BRANCH
    if state is LevelState.NOT_ITERATING:
        return LAST_BRANCH
    return ""


def x_padding(levels: LevelStateTable, depth: int, x_spacing: int) -> str:
    """
    Left margin for an entry at `depth`: one column per ancestor depth
    1..depth-1, each `1 + x_spacing` wide. The column carries a vertical bar
    while that ancestor still has siblings to come.
    """
    return "".join(
        (VERTICAL_BAR if state is LevelState.ITERATING else " ") + " " * x_spacing
        for state in levels.ancestors(depth)
    )


def y_padding(levels: LevelStateTable, depth: int, x_spacing: int, y_spacing: int) -> List[str]:
    """`y_spacing - 1` spacer rows, each ending in a lone vertical bar."""
    if depth == 0 or y_spacing <= 1:
        return []
    row = x_padding(levels, depth, x_spacing) + VERTICAL_BAR
    return [row] * (y_spacing - 1)


def entry_line(name: str, levels: LevelStateTable, depth: int, x_spacing: int) -> str:
    state = levels.get(depth)
    if depth == 0 or state is LevelState.ROOT:
        return name
    return (
        x_padding(levels, depth, x_spacing)
        + connector_glyph(state)
        + HORIZONTAL_RULE * x_spacing
        + name
    )


def entry_lines(
    name: str,
    levels: LevelStateTable,
    depth: int,
    x_spacing: int,
    y_spacing: int,
    first_line: bool = False,
) -> List[str]:
    """All output rows for one entry: spacer rows (never before the first line of a run) then the entry."""
    rows = [] if first_line else y_padding(levels, depth, x_spacing, y_spacing)
    rows.append(entry_line(name, levels, depth, x_spacing))
    return rows
