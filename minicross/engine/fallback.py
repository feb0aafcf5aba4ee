"""Fixed layout substituted when the retry budget runs out."""

from __future__ import annotations

from typing import Tuple

from ..core.constants import DEFAULT_GRID_SIZE, Direction
from ..core.exceptions import ValidationError
from ..core.models import Layout
from .grid import CrosswordGrid
from .numbering import assign_clue_numbers
from .validator import LayoutValidator


# (word, clue, row, col, direction) on a 7x7 grid.
FALLBACK_ENTRIES: Tuple[Tuple[str, str, int, int, Direction], ...] = (
    ("GARDEN", "Where vegetables and flowers grow", 3, 0, Direction.ACROSS),
    ("TIGER", "Striped big cat", 1, 0, Direction.DOWN),
    ("DOOR", "You knock on it before entering", 3, 3, Direction.DOWN),
    ("ONE", "The loneliest number", 2, 5, Direction.DOWN),
)


def build_fallback_layout() -> Layout:
    """Build the fallback puzzle and check it before handing it out."""

    grid = CrosswordGrid(DEFAULT_GRID_SIZE)
    for word, clue, row, col, direction in FALLBACK_ENTRIES:
        if not grid.can_place(word, row, col, direction):
            raise ValidationError(f"Fallback entry {word} cannot be placed at ({row},{col})")
        grid.place_word(word, row, col, direction, clue)
    grid.freeze()
    layout = Layout(
        grid_size=DEFAULT_GRID_SIZE,
        grid=grid.rows(),
        placements=tuple(assign_clue_numbers(grid.placements, DEFAULT_GRID_SIZE)),
    )
    result = LayoutValidator().validate(layout)
    if not result.ok:
        raise ValidationError(f"Fallback layout is invalid: {result.messages}")
    return layout
