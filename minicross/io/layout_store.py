"""Persistent layout document store.

Every generation result (generated or fallback) is saved as a JSON document
under ``local_db/collections/layouts/``. The documents carry the layout
record handed to the persistence boundary plus attempt diagnostics.
"""

from __future__ import annotations

import json
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.constants import BLOCKED_SYMBOL, Direction
from ..core.exceptions import ValidationError
from ..core.models import Layout
from ..engine.validator import LayoutValidator
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult, GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/layouts")


class LayoutStore:
    """Save layouts as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self.validator = LayoutValidator()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, result: "GenerationResult", config: "GeneratorConfig") -> str:
        """Persist a generation result and return its document ID."""
        validation = self.validator.validate(result.layout)
        if not validation.ok:
            raise ValidationError(f"Refusing to store invalid layout: {validation.messages}")

        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": "fallback" if result.used_fallback else "generated",
            "config": self._serialize_config(config),
            "attempts": result.attempts,
            "failures": result.failures,
            "layout": result.layout.to_record(),
            "stats": self._compute_stats(result.layout),
        }

        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Layout saved: %s (%s)", doc_id, doc["status"])
        return doc_id

    def load(self, doc_id: str) -> Layout:
        path = self.store_dir / f"{doc_id}.json"
        doc = json.loads(path.read_text(encoding="utf-8"))
        return Layout.from_record(doc["layout"])

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _compute_stats(layout: Layout) -> dict:
        symbols = Counter(symbol for row in layout.grid for symbol in row)
        blocked = symbols.pop(BLOCKED_SYMBOL, 0)
        lengths = [len(word) for word in layout.words]
        return {
            "total_cells": layout.grid_size * layout.grid_size,
            "letter_cells": sum(symbols.values()),
            "blocked_cells": blocked,
            "words": len(lengths),
            "across": sum(1 for p in layout.placements if p.direction == Direction.ACROSS),
            "down": sum(1 for p in layout.placements if p.direction == Direction.DOWN),
            "length_min": min(lengths) if lengths else 0,
            "length_max": max(lengths) if lengths else 0,
        }

    @staticmethod
    def _serialize_config(config: "GeneratorConfig") -> dict:
        return {
            "grid_size": config.grid_size,
            "max_attempts": config.max_attempts,
            "word_counts": list(config.word_counts),
            "seed": config.seed,
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
