"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import Layout


def format_grid(layout: Layout) -> str:
    width = layout.grid_size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(layout.grid):
        row_render = " ".join(f"{symbol:>2}" for symbol in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(layout: Layout) -> str:
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        entries = [p for p in layout.placements if p.direction == direction]
        if not entries:
            continue
        lines.append(direction.value.upper())
        for placement in entries:
            clue = placement.clue or "(no clue)"
            lines.append(f"  {placement.clue_number:>2}. {clue} ({placement.length})")
    return "\n".join(lines)


def format_layout(layout: Layout) -> str:
    return format_grid(layout) + "\n\n" + format_clues(layout)


def pretty_print_layout(layout: Layout, *, label: str | None = None, stream=None) -> None:
    """Print the layout grid and its numbered clues."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_layout(layout), file=stream)
