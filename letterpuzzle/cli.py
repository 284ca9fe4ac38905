"""Command line interface for the letter puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core.constants import DEFAULT_CYCLES, DEFAULT_SIZE, MIN_INTERACTIVE_SIZE
from .core.exceptions import WordSourceError
from .data.lexicon import Lexicon, LexiconConfig
from .data.sources import is_url
from .engine.generator import BoardGenerator, GenerationResult, GeneratorConfig
from .engine.search import SearchConfig, SearchResult, search_best_board
from .utils.logger import configure_logging
from .utils.pretty import print_board_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate letter grids where every row and column run is a word",
    )
    parser.add_argument(
        "--words",
        type=str,
        required=True,
        help="Word source: a JSON array file, a one-word-per-line file, or an http(s) URL",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board size in cells")
    parser.add_argument(
        "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help="Random placement attempts per board",
    )
    parser.add_argument(
        "--search-seconds",
        type=float,
        default=None,
        help="Keep the densest board generated within this many seconds",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--full-rescan",
        action="store_true",
        help="Recheck every row and column for each candidate instead of only touched lines",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON payload instead of the board")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_payload(result: GenerationResult, search: Optional[SearchResult] = None) -> Dict[str, Any]:
    return {
        "size": result.grid.size,
        "density": result.density,
        "placements": result.total_placements,
        "boards_generated": search.boards_generated if search is not None else 1,
        "seed": result.seed,
        "grid": result.grid.to_jsonable(),
        "words": [
            {
                "word": placement.word,
                "direction": placement.direction.value,
                "start": [placement.row, placement.col],
            }
            for placement in result.placements
        ],
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.size < MIN_INTERACTIVE_SIZE:
        parser.error(f"--size must be at least {MIN_INTERACTIVE_SIZE}")
    if args.cycles < 0:
        parser.error("--cycles cannot be negative")

    source = args.words if is_url(args.words) else Path(args.words)
    try:
        lexicon = Lexicon.from_config(LexiconConfig(source=source))
    except WordSourceError as exc:
        parser.error(str(exc))
    if not lexicon.is_usable:
        parser.error(f"no usable words in {args.words}")

    search: Optional[SearchResult] = None
    if args.search_seconds is not None:
        search = search_best_board(
            lexicon,
            SearchConfig(
                time_budget_seconds=args.search_seconds,
                size=args.size,
                cycles=args.cycles,
                seed=args.seed,
                full_rescan=args.full_rescan,
            ),
        )
        if search.best is None:
            print("No board completed within the search budget.", file=sys.stderr)
            return 1
        result = search.best
    else:
        generator = BoardGenerator(
            lexicon,
            GeneratorConfig(
                size=args.size,
                cycles=args.cycles,
                seed=args.seed,
                full_rescan=args.full_rescan,
            ),
        )
        result = generator.generate()

    payload = build_payload(result, search)
    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.json:
        print(output_text)
    else:
        print_board_stats(result, search)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
