"""Sequential clue numbering in reading order."""

from __future__ import annotations

import dataclasses
from typing import List, Sequence

from ..core.models import Placement


def assign_clue_numbers(placements: Sequence[Placement], grid_size: int) -> List[Placement]:
    """Return placements sorted by reading order with numbers ``1..N``.

    Across and down entries starting on the same cell get separate numbers;
    consumers key their state off the number of each placement.
    """

    ordered = sorted(placements, key=lambda p: p.start_row * grid_size + p.start_col)
    return [
        dataclasses.replace(placement, clue_number=index)
        for index, placement in enumerate(ordered, start=1)
    ]
