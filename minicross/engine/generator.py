"""Generation supervisor: bounded retries around selection and layout search."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..core.constants import DEFAULT_GRID_SIZE, MAX_ATTEMPTS, WORD_COUNTS
from ..core.exceptions import CrosswordError, DisconnectedLayout, PlacementExhausted
from ..core.models import Layout, Word
from ..data.word_pool import PoolItem, WordPool, normalize_entries
from ..utils.logger import get_logger
from .fallback import build_fallback_layout
from .layout import search_layout
from .selector import select_words


LOGGER = get_logger(__name__)

PoolSource = Union[WordPool, Sequence[PoolItem]]


@dataclass
class GeneratorConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    max_attempts: int = MAX_ATTEMPTS
    word_counts: Tuple[int, ...] = WORD_COUNTS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not self.word_counts:
            raise ValueError("word_counts must not be empty")


@dataclass
class GenerationResult:
    layout: Layout
    attempts: int
    used_fallback: bool = False
    words: List[Word] = field(default_factory=list)
    failures: Dict[str, int] = field(default_factory=dict)


def _resolve_pool(pool: PoolSource) -> List[Word]:
    if hasattr(pool, "entries"):
        return pool.entries()
    return normalize_entries(pool)


class CrosswordGenerator:
    """Runs up to ``max_attempts`` selection + search rounds, then falls back."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, pool: PoolSource, desired_count: Optional[int] = None) -> GenerationResult:
        if desired_count is not None and desired_count not in self.config.word_counts:
            raise ValueError(
                f"desired_count must be one of {self.config.word_counts}, got {desired_count}"
            )
        entries = _resolve_pool(pool)
        failures: Counter = Counter()

        for attempt in range(1, self.config.max_attempts + 1):
            count = desired_count
            if count is None:
                count = self.rng.choice(self.config.word_counts)
            words = select_words(entries, count, self.rng)
            LOGGER.debug(
                "Attempt %s/%s with %s words: %s",
                attempt,
                self.config.max_attempts,
                len(words),
                ", ".join(word.text for word in words),
            )
            try:
                layout = search_layout(words, self.config.grid_size)
            except (PlacementExhausted, DisconnectedLayout) as exc:
                failures[type(exc).__name__] += 1
                LOGGER.debug("Attempt %s failed: %s", attempt, exc)
                continue
            LOGGER.info(
                "Layout generated on attempt %s with %s words", attempt, len(layout.placements)
            )
            return GenerationResult(
                layout=layout,
                attempts=attempt,
                words=words,
                failures=dict(failures),
            )

        LOGGER.warning(
            "No layout after %s attempts from a pool of %s words (%s); using fallback puzzle",
            self.config.max_attempts,
            len(entries),
            ", ".join(f"{name}={count}" for name, count in sorted(failures.items())),
        )
        return GenerationResult(
            layout=self._fallback(),
            attempts=self.config.max_attempts,
            used_fallback=True,
            failures=dict(failures),
        )

    def _fallback(self) -> Layout:
        if self.config.grid_size != DEFAULT_GRID_SIZE:
            LOGGER.warning(
                "Fallback puzzle is %sx%s; configured grid size %s is not honoured",
                DEFAULT_GRID_SIZE,
                DEFAULT_GRID_SIZE,
                self.config.grid_size,
            )
        try:
            return build_fallback_layout()
        except CrosswordError:
            LOGGER.exception("Fallback layout failed validation")
            raise


def generate(
    pool: PoolSource,
    desired_count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Layout:
    """Return a layout for ``pool``, degrading to the fallback puzzle."""

    return CrosswordGenerator(rng=rng).generate(pool, desired_count).layout
