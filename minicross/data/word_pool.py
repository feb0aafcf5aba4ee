"""Word pool sources feeding the generator."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Protocol, Tuple, Union

from ..core.exceptions import WordPoolError
from ..core.models import Word
from ..utils.logger import get_logger
from .normalization import clean_word

if TYPE_CHECKING:
    from ..io.pool_client import WordPoolClient


LOGGER = get_logger(__name__)

MIN_WORD_LENGTH = 2

PoolItem = Union[Word, str, Tuple[str, str]]


class WordPool(Protocol):
    def entries(self) -> List[Word]:
        """Return the available (word, clue) pairs."""


def parse_entry(item: PoolItem) -> Word:
    """Turn ``Word``, ``(word, clue)`` or ``"WORD:Clue"`` into a clean ``Word``."""

    if isinstance(item, Word):
        word, clue = item.text, item.clue
    elif isinstance(item, str):
        word, _, clue = item.partition(":")
    else:
        word, clue = item
    return Word(clean_word(word), clue.strip())


def normalize_entries(items: Iterable[PoolItem]) -> List[Word]:
    entries: List[Word] = []
    for item in items:
        entry = parse_entry(item)
        if len(entry.text) < MIN_WORD_LENGTH:
            LOGGER.debug("Skipping pool entry %r: too short after cleaning", item)
            continue
        entries.append(entry)
    return entries


class StaticWordPool:
    """Returns an in-memory list of pairs."""

    def __init__(self, items: Iterable[PoolItem]) -> None:
        self._entries = normalize_entries(items)

    def entries(self) -> List[Word]:
        return list(self._entries)


class FileWordPool:
    """Reads one ``WORD`` or ``WORD:Clue`` per line. Blank lines and # comments are skipped."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def entries(self) -> List[Word]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise WordPoolError(f"Cannot read word pool {self.path}: {exc}") from exc
        lines = []
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            lines.append(line)
        entries = normalize_entries(lines)
        LOGGER.info("Loaded %s pool entries from %s", len(entries), self.path)
        return entries


class HttpWordPool:
    """Fetches pairs from a remote word service."""

    def __init__(self, client: "WordPoolClient") -> None:
        self.client = client

    def entries(self) -> List[Word]:
        return normalize_entries(self.client.fetch_pairs())
