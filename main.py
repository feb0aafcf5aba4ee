"""CLI entrypoint for the crossword layout generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from minicross.core.constants import DEFAULT_GRID_SIZE, MAX_ATTEMPTS, WORD_COUNTS
from minicross.data.word_pool import FileWordPool, HttpWordPool, StaticWordPool, WordPool
from minicross.engine.generator import CrosswordGenerator, GeneratorConfig
from minicross.io.layout_store import LayoutStore
from minicross.io.pool_client import WordPoolClient
from minicross.utils.logger import configure_logging
from minicross.utils.pretty import pretty_print_layout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a small crossword layout from a word+clue pool",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit pool entries (format: WORD or WORD:Clue)",
    )
    source.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    source.add_argument(
        "--pool-url",
        type=str,
        metavar="URL",
        help="Base URL of a JSON word service exposing GET /words",
    )
    parser.add_argument(
        "--count",
        type=int,
        choices=list(WORD_COUNTS),
        help="Words per attempt (default: coin flip between 3 and 4)",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Grid side length")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_ATTEMPTS,
        help="Attempts before substituting the fallback puzzle",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--store-dir",
        type=Path,
        help="Persist the result as a JSON document in this directory",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_pool(args: argparse.Namespace) -> WordPool:
    if args.words:
        return StaticWordPool(args.words)
    if args.words_file:
        return FileWordPool(args.words_file)
    return HttpWordPool(WordPoolClient(base_url=args.pool_url))


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.grid_size < 3:
        parser.error("--grid-size must be at least 3")
    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")

    config = GeneratorConfig(
        grid_size=args.grid_size,
        max_attempts=args.max_attempts,
        seed=args.seed,
    )
    generator = CrosswordGenerator(config)
    result = generator.generate(build_pool(args), desired_count=args.count)

    label = "Fallback puzzle" if result.used_fallback else f"Generated in {result.attempts} attempt(s)"
    pretty_print_layout(result.layout, label=label)

    if args.store_dir:
        LayoutStore(args.store_dir).save(result, config)

    if args.output:
        payload = {
            "usedFallback": result.used_fallback,
            "attempts": result.attempts,
            **result.layout.to_record(),
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
