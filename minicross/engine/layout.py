"""Iterative intersection search producing a crossword layout.

The search is first-fit: the seed word goes across the middle row, then each
round walks the unplaced words in order and takes the first legal crossing it
finds against the words already placed. Retry tuning upstream depends on this
scan order, so it is kept exactly.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from ..core.constants import DEFAULT_GRID_SIZE, Direction
from ..core.exceptions import DisconnectedLayout, PlacementExhausted
from ..core.models import Layout, Placement, Word
from ..utils.logger import get_logger
from .connectivity import is_connected
from .grid import CrosswordGrid
from .numbering import assign_clue_numbers


LOGGER = get_logger(__name__)

WordLike = Union[Word, str, Tuple[str, str]]


def _find_crossing(grid: CrosswordGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
    for placed in grid.placements:
        direction = placed.direction.flipped()
        for j, letter in enumerate(word):
            for k, placed_letter in enumerate(placed.word):
                if letter != placed_letter:
                    continue
                if placed.direction == Direction.ACROSS:
                    row, col = placed.start_row - j, placed.start_col + k
                else:
                    row, col = placed.start_row + k, placed.start_col - j
                if grid.can_place(word, row, col, direction):
                    return row, col, direction
    return None


def search_layout(words: Iterable[WordLike], grid_size: int = DEFAULT_GRID_SIZE) -> Layout:
    """Place every word or raise.

    Raises :class:`PlacementExhausted` when the seed word does not fit or a
    full round places nothing, and :class:`DisconnectedLayout` when every word
    was placed but the placements form more than one group.
    """

    entries: List[Word] = sorted((Word.coerce(item) for item in words), key=lambda w: -len(w.text))
    if not entries:
        raise PlacementExhausted("No words to place")

    grid = CrosswordGrid(grid_size)
    seed = entries[0]
    row, col = grid_size // 2, (grid_size - len(seed.text)) // 2
    if not grid.can_place(seed.text, row, col, Direction.ACROSS):
        raise PlacementExhausted(f"Seed word {seed.text} does not fit a {grid_size}x{grid_size} grid")
    grid.place_word(seed.text, row, col, Direction.ACROSS, seed.clue)

    unplaced = entries[1:]
    while unplaced:
        progress = False
        for entry in unplaced:
            crossing = _find_crossing(grid, entry.text)
            if crossing is None:
                continue
            grid.place_word(entry.text, *crossing, clue=entry.clue)
            unplaced.remove(entry)
            progress = True
            break
        if not progress:
            raise PlacementExhausted(
                "No crossing for: " + ", ".join(entry.text for entry in unplaced)
            )

    if not is_connected(grid.placements):
        raise DisconnectedLayout(f"{len(grid.placements)} placements are not a single group")

    grid.freeze()
    placements: List[Placement] = assign_clue_numbers(grid.placements, grid_size)
    return Layout(grid_size=grid_size, grid=grid.rows(), placements=tuple(placements))


def generate_layout(words: Iterable[WordLike], grid_size: int = DEFAULT_GRID_SIZE) -> Optional[Layout]:
    """Return a layout for ``words`` or ``None`` when the attempt fails."""

    try:
        return search_layout(words, grid_size)
    except (PlacementExhausted, DisconnectedLayout) as exc:
        LOGGER.debug("Layout attempt failed: %s", exc)
        return None
