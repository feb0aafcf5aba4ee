"""Data models supporting the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import BLOCKED_SYMBOL, OPEN_SYMBOL, CellKind, Direction


@dataclass(frozen=True)
class Word:
    """A candidate entry from the word pool."""

    text: str
    clue: str = ""

    @classmethod
    def coerce(cls, item: "Word | str | Tuple[str, str]") -> "Word":
        if isinstance(item, Word):
            return item
        if isinstance(item, str):
            return cls(item.upper())
        text, clue = item
        return cls(text.upper(), clue)


@dataclass(frozen=True)
class Cell:
    """Tagged grid cell: open, a letter, or blocked."""

    kind: CellKind = CellKind.OPEN
    letter: Optional[str] = None

    @classmethod
    def open(cls) -> "Cell":
        return cls(CellKind.OPEN)

    @classmethod
    def blocked(cls) -> "Cell":
        return cls(CellKind.BLOCKED)

    @classmethod
    def with_letter(cls, letter: str) -> "Cell":
        return cls(CellKind.LETTER, letter)

    def is_open(self) -> bool:
        return self.kind == CellKind.OPEN

    @property
    def symbol(self) -> str:
        if self.kind == CellKind.LETTER:
            return self.letter or "?"
        if self.kind == CellKind.BLOCKED:
            return BLOCKED_SYMBOL
        return OPEN_SYMBOL


@dataclass(frozen=True)
class Placement:
    """A word committed to the grid."""

    word: str
    start_row: int
    start_col: int
    direction: Direction
    clue: str = ""
    clue_number: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]

    @property
    def end_row(self) -> int:
        return self.cells[-1][0]

    @property
    def end_col(self) -> int:
        return self.cells[-1][1]

    @property
    def bounding_box(self) -> Tuple[int, int, int, int]:
        """Return ``(top, left, bottom, right)`` inclusive."""
        return self.start_row, self.start_col, self.end_row, self.end_col

    def to_record(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "direction": self.direction.value,
            "clueNumber": self.clue_number,
        }


@dataclass(frozen=True)
class Layout:
    """Final output of a successful attempt."""

    grid_size: int
    grid: Tuple[Tuple[str, ...], ...]
    placements: Tuple[Placement, ...]

    @property
    def words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def clues(self) -> List[str]:
        return [placement.clue for placement in self.placements]

    def to_record(self) -> Dict[str, Any]:
        """Shape handed to the persistence boundary."""
        return {
            "gridSize": self.grid_size,
            "grid": [list(row) for row in self.grid],
            "placements": [placement.to_record() for placement in self.placements],
            "words": self.words,
            "clues": self.clues,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Layout":
        clues: Sequence[str] = record.get("clues") or []
        placements = []
        for index, item in enumerate(record["placements"]):
            placements.append(
                Placement(
                    word=item["word"],
                    start_row=int(item["startRow"]),
                    start_col=int(item["startCol"]),
                    direction=Direction(item["direction"]),
                    clue=clues[index] if index < len(clues) else "",
                    clue_number=item.get("clueNumber"),
                )
            )
        return cls(
            grid_size=int(record["gridSize"]),
            grid=tuple(tuple(row) for row in record["grid"]),
            placements=tuple(placements),
        )
