"""Board generation by repeated randomized trial placement.

Each cycle draws one word, collects every position where the word could be
placed without breaking the grid, and commits one of them at random. Most
cycles fail to place anything; the density of the finished board is a side
effect of running many cycles rather than something optimized directly.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import DEFAULT_CYCLES, DEFAULT_SIZE, Direction
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .grid import GridConfig, LetterGrid
from .validator import GridValidator, PlacementValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_SIZE
    cycles: int = DEFAULT_CYCLES
    seed: Optional[int] = None
    full_rescan: bool = False
    validate_result: bool = True

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size=self.size)


@dataclass
class GenerationResult:
    grid: LetterGrid
    placements: List[Placement] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def density(self) -> float:
        return self.grid.density

    @property
    def total_placements(self) -> int:
        return len(self.placements)


class BoardGenerator:
    """Fills one fresh grid; owns it exclusively and shares only the lexicon."""

    def __init__(self, lexicon: Lexicon, config: Optional[GeneratorConfig] = None) -> None:
        self.lexicon = lexicon
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.grid = LetterGrid(self.config.to_grid_config())
        self.validator = PlacementValidator(lexicon, full_rescan=self.config.full_rescan)
        self.placements: List[Placement] = []

    @property
    def total_placements(self) -> int:
        return self.grid.placement_count

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        if not self.lexicon.is_usable:
            LOGGER.warning("Lexicon has no words; returning an empty %dx%d grid", self.grid.size, self.grid.size)
        else:
            for _ in range(self.config.cycles):
                self.step()

        LOGGER.info(
            "Generated %dx%d board: %d words placed in %d cycles (density %.3f)",
            self.grid.size,
            self.grid.size,
            self.total_placements,
            self.config.cycles,
            self.grid.density,
        )
        if self.config.validate_result:
            validation = GridValidator(self.lexicon).validate(self.grid)
            if not validation.ok:
                raise ValidationError(f"Grid validation failed: {validation.messages}")
        return GenerationResult(grid=self.grid, placements=list(self.placements), seed=self.config.seed)

    def step(self) -> Optional[Placement]:
        """Run a single cycle; return the committed placement, if any."""

        if not self.lexicon.words:
            return None
        word = self.rng.choice(self.lexicon.words)
        valid = [
            placement
            for placement in self.candidate_placements(word)
            if self.validator.is_valid(self.grid, placement)
        ]
        if not valid:
            return None
        placement = self.rng.choice(valid)
        self.grid.place_word(placement)
        self.placements.append(placement)
        return placement

    def candidate_placements(self, word: str) -> List[Placement]:
        """Every in-bounds position for ``word``: across first, then down.

        A word longer than the board yields no positions at all.
        """

        size = self.grid.size
        length = len(word)
        candidates = [
            Placement(Direction.ACROSS, r, c, word)
            for r in range(size)
            for c in range(size - length + 1)
        ]
        candidates.extend(
            Placement(Direction.DOWN, r, c, word)
            for r in range(size - length + 1)
            for c in range(size)
        )
        return candidates
