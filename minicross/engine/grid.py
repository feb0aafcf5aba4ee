"""Grid representation with placement validation and mutation."""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import Bounds, CellKind, Direction
from ..core.exceptions import GridFrozenError
from ..core.models import Cell, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class CrosswordGrid:
    """Square working grid for a single generation attempt."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Cell]] = [[Cell.open() for _ in range(size)] for _ in range(size)]
        self.placements: List[Placement] = []
        self.frozen = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def _is_open_or_outside(self, row: int, col: int) -> bool:
        if not self.bounds.contains(row, col):
            return True
        return self.cells[row][col].is_open()

    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(cell.symbol for cell in row) for row in self.cells)

    # ------------------------------------------------------------------
    # Placement validation
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Return whether ``word`` may legally occupy the given run."""

        if not word or row < 0 or col < 0:
            return False
        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)
        if not self.bounds.contains(end_row, end_col):
            return False

        # Words must not run into a neighbour along their own axis.
        if not self._is_open_or_outside(row - dr, col - dc):
            return False
        if not self._is_open_or_outside(end_row + dr, end_col + dc):
            return False

        # Perpendicular offsets: across words look up/down, down words left/right.
        side_steps = ((-1, 0), (1, 0)) if direction == Direction.ACROSS else ((0, -1), (0, 1))
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            cell = self.cells[r][c]
            if not cell.is_open():
                if cell.kind != CellKind.LETTER or cell.letter != letter:
                    return False
                continue
            for sr, sc in side_steps:
                if not self._is_open_or_outside(r + sr, c + sc):
                    return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction,
        clue: str = "",
    ) -> Placement:
        """Commit a placement already approved by :meth:`can_place`."""

        if self.frozen:
            raise GridFrozenError("Cannot place words on a frozen grid")
        placement = Placement(word=word, start_row=row, start_col=col, direction=direction, clue=clue)
        for letter, (r, c) in zip(word, placement.cells):
            self.cells[r][c] = Cell.with_letter(letter)
        self.placements.append(placement)
        LOGGER.debug("Placed %s at (%s,%s) %s", word, row, col, direction.value)
        return placement

    def freeze(self) -> None:
        """Turn every untouched cell into a blocked cell and lock the grid."""

        if self.frozen:
            return
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c].is_open():
                    self.cells[r][c] = Cell.blocked()
        self.frozen = True

