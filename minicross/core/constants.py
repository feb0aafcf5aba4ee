"""Shared constants and enumerations for the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    def flipped(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class CellKind(str, Enum):
    """All supported cell kinds in the grid."""

    OPEN = "OPEN"
    LETTER = "LETTER"
    BLOCKED = "BLOCKED"


BLOCKED_SYMBOL = "#"
OPEN_SYMBOL = "."

DEFAULT_GRID_SIZE = 7
MAX_ATTEMPTS = 50
WORD_COUNTS: Tuple[int, ...] = (3, 4)
SELECTION_JITTER = 0.5


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
