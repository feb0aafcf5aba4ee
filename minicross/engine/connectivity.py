"""Connectivity check over a set of placements."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from ..core.models import Placement


def boxes_overlap(first: Placement, second: Placement) -> bool:
    top_a, left_a, bottom_a, right_a = first.bounding_box
    top_b, left_b, bottom_b, right_b = second.bounding_box
    return top_a <= bottom_b and top_b <= bottom_a and left_a <= right_b and left_b <= right_a


def is_connected(placements: Sequence[Placement]) -> bool:
    """Return whether every placement is reachable from the first one.

    Two placements are adjacent when their occupied cell ranges overlap. For
    word-shaped rectangles that is the same as sharing a cell.
    """

    if len(placements) <= 1:
        return True

    visited = {0}
    queue = deque([0])
    while queue:
        current = placements[queue.popleft()]
        for index, other in enumerate(placements):
            if index in visited:
                continue
            if boxes_overlap(current, other):
                visited.add(index)
                queue.append(index)
    return len(visited) == len(placements)
