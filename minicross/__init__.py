"""Crossword layout synthesis for small daily puzzles.

This package exposes the public API surface via:

- ``minicross.engine.generator.CrosswordGenerator``: bounded retries with a fallback puzzle.
- ``minicross.engine.layout.generate_layout``: a single layout attempt for a fixed word list.
- ``minicross.data.word_pool``: word+clue sources feeding the generator.
"""

from .core.models import Layout, Placement, Word
from .data.word_pool import FileWordPool, HttpWordPool, StaticWordPool
from .engine.generator import CrosswordGenerator, GenerationResult, GeneratorConfig, generate
from .engine.layout import generate_layout

__all__ = [
    "CrosswordGenerator",
    "FileWordPool",
    "GenerationResult",
    "GeneratorConfig",
    "HttpWordPool",
    "Layout",
    "Placement",
    "StaticWordPool",
    "Word",
    "generate",
    "generate_layout",
]

__version__ = "0.1.0"
