"""Word selection biased toward mutually overlapping letters."""

from __future__ import annotations

import random
from collections import Counter
from typing import Iterable, List, Sequence

from ..core.constants import SELECTION_JITTER
from ..core.models import Word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def overlap_score(first: str, second: str) -> int:
    """Count letters of ``first`` matchable one-to-one against ``second``."""

    return sum((Counter(first) & Counter(second)).values())


def _unique_by_text(pool: Iterable[Word]) -> List[Word]:
    seen = set()
    unique: List[Word] = []
    for entry in pool:
        if entry.text in seen:
            continue
        seen.add(entry.text)
        unique.append(entry)
    return unique


def select_words(pool: Sequence[Word], count: int, rng: random.Random) -> List[Word]:
    """Pick ``count`` distinct words, greedily favouring shared letters.

    The first word is drawn uniformly. Every following pick is the remaining
    candidate with the highest summed overlap against the words already
    picked, plus jitter in ``[0, SELECTION_JITTER)`` so equal scores do not
    always resolve the same way. The result only biases toward a
    layout-friendly set; it does not guarantee one exists.
    """

    candidates = _unique_by_text(pool)
    if len(candidates) < count:
        return candidates

    seed = rng.choice(candidates)
    picked = [seed]
    remaining = [entry for entry in candidates if entry is not seed]

    while len(picked) < count and remaining:
        best = None
        best_score = float("-inf")
        for candidate in remaining:
            score = sum(overlap_score(candidate.text, chosen.text) for chosen in picked)
            score += rng.random() * SELECTION_JITTER
            if score > best_score:
                best, best_score = candidate, score
        picked.append(best)
        remaining.remove(best)

    LOGGER.debug("Selected words: %s", ", ".join(entry.text for entry in picked))
    return picked
