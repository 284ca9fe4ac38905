"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import DEFAULT_SIZE, EMPTY, MIN_RUN_LENGTH, Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import Placement, Run
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class LetterGrid:
    """Square board of cells, each ``EMPTY`` or holding one lowercase letter."""

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        self.size = self.config.size
        self.bounds = self.config.bounds()
        self.cells: List[List[str]] = [[EMPTY] * self.size for _ in range(self.size)]
        self.placement_count = 0
        self._filled_count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY

    def masked_letter(self, placement: Optional[Placement], row: int, col: int) -> str:
        """Letter at ``(row, col)`` as if ``placement`` had been committed."""

        if placement is not None:
            letter = placement.letter_at(row, col)
            if letter is not None:
                return letter
        return self.cells[row][col]

    def line(self, index: int, direction: Direction, placement: Optional[Placement] = None) -> List[str]:
        """Row ``index`` (ACROSS) or column ``index`` (DOWN), optionally masked.

        ``placement`` must lie on the board; use :meth:`fits` first.
        """

        if direction == Direction.ACROSS:
            chars = list(self.cells[index])
        else:
            chars = [row[index] for row in self.cells]
        if placement is None:
            return chars

        word = placement.word
        if placement.direction == direction:
            own, start = (placement.row, placement.col) if direction == Direction.ACROSS else (placement.col, placement.row)
            if own == index:
                chars[start:start + len(word)] = word
        else:
            cross, start = (placement.col, placement.row) if direction == Direction.ACROSS else (placement.row, placement.col)
            if start <= index < start + len(word):
                chars[cross] = word[index - start]
        return chars

    def fits(self, placement: Placement) -> bool:
        row, col, length = placement.row, placement.col, len(placement.word)
        if placement.direction == Direction.ACROSS:
            return 0 <= row < self.size and 0 <= col and col + length <= self.size
        return 0 <= col < self.size and 0 <= row and row + length <= self.size

    @property
    def filled_count(self) -> int:
        return self._filled_count

    @property
    def density(self) -> float:
        return self._filled_count / (self.size * self.size)

    def runs(self, min_length: int = MIN_RUN_LENGTH) -> List[Run]:
        """Derive every maximal run of letters, rows first then columns."""

        found: List[Run] = []
        for direction in (Direction.ACROSS, Direction.DOWN):
            for index in range(self.size):
                chars = self.line(index, direction)
                start = 0
                for pos in range(self.size + 1):
                    if pos < self.size and chars[pos] != EMPTY:
                        continue
                    if pos - start >= min_length:
                        text = "".join(chars[start:pos])
                        if direction == Direction.ACROSS:
                            found.append(Run(direction, index, start, text))
                        else:
                            found.append(Run(direction, start, index, text))
                    start = pos + 1
        return found

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, placement: Placement) -> None:
        cells = placement.cells
        for index, (row, col) in enumerate(cells):
            if not self.bounds.contains(row, col):
                raise PlacementError("Word extends outside grid")
            existing = self.cells[row][col]
            if existing != EMPTY and existing != placement.word[index]:
                raise PlacementError(
                    f"Letter conflict at {(row, col)}: {existing!r} vs {placement.word[index]!r}"
                )

        # All checks passed, mutate grid
        for index, (row, col) in enumerate(cells):
            if self.cells[row][col] == EMPTY:
                self._filled_count += 1
            self.cells[row][col] = placement.word[index]
        self.placement_count += 1
        LOGGER.debug(
            "Placed '%s' %s at (%d,%d); %d words on board",
            placement.word,
            placement.direction.value,
            placement.row,
            placement.col,
            self.placement_count,
        )

    def copy(self) -> "LetterGrid":
        clone = LetterGrid(self.config)
        clone.cells = [list(row) for row in self.cells]
        clone.placement_count = self.placement_count
        clone._filled_count = self._filled_count
        return clone

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def render(self) -> str:
        border = "+" + "-" * self.size + "+"
        body = ["|" + "".join(row) + "|" for row in self.cells]
        return "\n".join([border, *body, border])

    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [[None if cell == EMPTY else cell for cell in row] for row in self.cells]

    def __str__(self) -> str:
        return self.render()
