"""Deterministic rule validation for finished layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..core.constants import BLOCKED_SYMBOL, Bounds
from ..core.exceptions import ValidationError
from ..core.models import Layout
from ..utils.logger import get_logger
from .connectivity import is_connected


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs deterministic validation over a frozen layout."""

    def validate(self, layout: Layout) -> ValidationResult:
        try:
            self._check_grid_shape(layout)
            self._check_letters_match(layout)
            self._check_run_boundaries(layout)
            self._check_clue_numbers(layout)
            self._check_connected(layout)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_grid_shape(self, layout: Layout) -> None:
        if len(layout.grid) != layout.grid_size:
            raise ValidationError(f"Grid has {len(layout.grid)} rows, expected {layout.grid_size}")
        for r, row in enumerate(layout.grid):
            if len(row) != layout.grid_size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {layout.grid_size}")
            for c, symbol in enumerate(row):
                if symbol == BLOCKED_SYMBOL:
                    continue
                if len(symbol) != 1 or not symbol.isalpha() or not symbol.isupper():
                    raise ValidationError(f"Invalid cell '{symbol}' at ({r},{c})")

    def _check_letters_match(self, layout: Layout) -> None:
        bounds = Bounds(layout.grid_size, layout.grid_size)
        written: Dict[Tuple[int, int], str] = {}
        for placement in layout.placements:
            for letter, (r, c) in zip(placement.word, placement.cells):
                if not bounds.contains(r, c):
                    raise ValidationError(f"{placement.word} leaves the grid at ({r},{c})")
                previous = written.setdefault((r, c), letter)
                if previous != letter:
                    raise ValidationError(
                        f"Conflicting letters '{previous}'/'{letter}' at ({r},{c})"
                    )
                if layout.grid[r][c] != letter:
                    raise ValidationError(
                        f"{placement.word} expects '{letter}' at ({r},{c}), grid has '{layout.grid[r][c]}'"
                    )
        for r, row in enumerate(layout.grid):
            for c, symbol in enumerate(row):
                if symbol != BLOCKED_SYMBOL and (r, c) not in written:
                    raise ValidationError(f"Letter '{symbol}' at ({r},{c}) belongs to no word")

    def _check_run_boundaries(self, layout: Layout) -> None:
        bounds = Bounds(layout.grid_size, layout.grid_size)
        for placement in layout.placements:
            dr, dc = placement.direction.step
            for r, c in (
                (placement.start_row - dr, placement.start_col - dc),
                (placement.end_row + dr, placement.end_col + dc),
            ):
                if bounds.contains(r, c) and layout.grid[r][c] != BLOCKED_SYMBOL:
                    raise ValidationError(
                        f"{placement.word} runs into '{layout.grid[r][c]}' at ({r},{c})"
                    )

    def _check_clue_numbers(self, layout: Layout) -> None:
        numbers = [placement.clue_number for placement in layout.placements]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValidationError(f"Clue numbers {numbers} are not 1..{len(numbers)}")
        positions = [
            placement.start_row * layout.grid_size + placement.start_col
            for placement in layout.placements
        ]
        if positions != sorted(positions):
            raise ValidationError("Clue numbers do not follow reading order")

    def _check_connected(self, layout: Layout) -> None:
        if not is_connected(layout.placements):
            raise ValidationError("Placements do not form a single connected group")
