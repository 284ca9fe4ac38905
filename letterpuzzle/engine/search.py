"""Best-of-N search: regenerate boards until a time budget runs out."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.constants import DEFAULT_CYCLES, DEFAULT_SIZE
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .generator import BoardGenerator, GenerationResult, GeneratorConfig


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    time_budget_seconds: float
    size: int = DEFAULT_SIZE
    cycles: int = DEFAULT_CYCLES
    seed: Optional[int] = None
    full_rescan: bool = False

    def to_generator_config(self, seed_override: Optional[int] = None) -> GeneratorConfig:
        return GeneratorConfig(
            size=self.size,
            cycles=self.cycles,
            seed=seed_override if seed_override is not None else self.seed,
            full_rescan=self.full_rescan,
        )


@dataclass
class SearchResult:
    best: Optional[GenerationResult]
    boards_generated: int = 0
    densities: List[float] = field(default_factory=list)

    @property
    def best_density(self) -> float:
        return self.best.density if self.best is not None else 0.0


def search_best_board(
    lexicon: Lexicon,
    config: SearchConfig,
    clock: Callable[[], float] = time.monotonic,
) -> SearchResult:
    """Keep the densest of as many boards as fit in the time budget.

    The deadline is checked before each board; a board that starts in time
    runs to completion. If no board starts, ``best`` is ``None``.
    """

    rng = random.Random(config.seed)
    result = SearchResult(best=None)
    start = clock()

    while clock() - start < config.time_budget_seconds:
        board_seed = rng.randint(0, 1_000_000) if config.seed is not None else None
        board = BoardGenerator(lexicon, config.to_generator_config(seed_override=board_seed)).generate()
        result.boards_generated += 1
        result.densities.append(board.density)

        if result.best is None or board.density > result.best.density:
            result.best = board
            LOGGER.info(
                "Board %d improved density to %.3f (%d words)",
                result.boards_generated,
                board.density,
                board.total_placements,
            )

    if result.best is None:
        LOGGER.warning("Search budget of %.2fs allowed no complete board", config.time_budget_seconds)
    else:
        LOGGER.info(
            "Searched %d boards in %.2fs; best density %.3f",
            result.boards_generated,
            clock() - start,
            result.best_density,
        )
    return result
