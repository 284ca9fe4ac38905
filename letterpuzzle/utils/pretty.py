"""Pretty-print helpers for letter grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.grid import LetterGrid
    from ..engine.search import SearchResult


def format_grid(grid: LetterGrid) -> str:
    """Bordered ASCII rendering; empty cells show as ``.``."""
    return grid.render()


def print_board_stats(
    result: GenerationResult,
    search: Optional[SearchResult] = None,
    *,
    stream=None,
) -> None:
    """Print grid + stats for a generated board."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    grid = result.grid
    total_cells = grid.size * grid.size
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {grid.filled_count} ({result.density * 100:.0f}%)", file=stream)
    print(f"  Placements:    {result.total_placements}", file=stream)

    runs = grid.runs()
    lengths = [run.length for run in runs]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Runs on board: {len(runs)}", file=stream)
    if lengths:
        length_dist = Counter(lengths)
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{l}:{c}" for l, c in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if search is not None:
        print(file=stream)
        print("--- Search ---", file=stream)
        print(f"  Boards:        {search.boards_generated}", file=stream)
        print(f"  Best density:  {search.best_density:.3f}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
