# src/lstree/core/level_state.py
"""
level_state.py — per-depth iteration state of the directory walk

Every depth of the walk records whether the entry being rendered there still
has siblings after it. Ancestors' states decide whether a vertical bar keeps
running down the left margin; the entry's own state picks its connector.

The table is a value, not a shared map: set() hands back a new table that
keeps depths 0..depth-1 and drops everything deeper, so each recursive call
sees exactly its own ancestor chain.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterator, Tuple

from .errors import InvalidLevelState


class LevelState(str, Enum):
    ITERATING = "iterating"          # more siblings follow at this depth
    NOT_ITERATING = "not_iterating"  # last sibling at this depth
    ROOT = "root"                    # depth 0 only


def state_for_position(index: int, count: int) -> LevelState:
    """ITERATING for every position except the last of `count` siblings."""
    return LevelState.ITERATING if index < count - 1 else LevelState.NOT_ITERATING


class LevelStateTable:
    __slots__ = ("_states",)

    def __init__(self, states: Tuple[LevelState, ...] = (LevelState.ROOT,)):
        states = tuple(states)
        if not states or states[0] is not LevelState.ROOT:
            raise InvalidLevelState("Level 0 must hold the root state")
        if LevelState.ROOT in states[1:]:
            raise InvalidLevelState("Only level 0 may hold the root state")
        self._states = states

    @classmethod
    def root(cls) -> "LevelStateTable":
        return cls()

    @property
    def depth(self) -> int:
        """Deepest level with a recorded state."""
        return len(self._states) - 1

    def get(self, depth: int) -> LevelState:
        if depth < 0 or depth >= len(self._states):
            raise InvalidLevelState(f"Level {depth} doesn't exist!")
        return self._states[depth]

    def set(self, depth: int, state: LevelState) -> "LevelStateTable":
        if depth == 0:
            raise InvalidLevelState("Level 0 is fixed to the root state")
        if state is LevelState.ROOT:
            raise InvalidLevelState(f"Level {depth} cannot hold the root state")
        if depth < 0 or depth > len(self._states):
            raise InvalidLevelState(f"Level {depth - 1} doesn't exist!")
        return LevelStateTable(self._states[:depth] + (LevelState(state),))

    def ancestors(self, depth: int) -> Iterator[LevelState]:
        for level in range(1, depth):
            yield self.get(level)

    def __len__(self) -> int:
        return len(self._states)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LevelStateTable):
            return NotImplemented
        return self._states == other._states

    def __hash__(self) -> int:
        return hash(self._states)

    def __repr__(self) -> str:
        body = ", ".join(f"{i}={s.value}" for i, s in enumerate(self._states))
        return f"LevelStateTable({body})"
