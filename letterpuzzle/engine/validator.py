"""Placement admissibility and whole-grid rule validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..core.constants import EMPTY, MIN_RUN_LENGTH, Direction
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..data.lexicon import Lexicon
from ..data.normalization import is_valid_word
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class PlacementValidator:
    """Decides whether a candidate placement keeps the grid valid.

    ``is_valid`` is a pure predicate: it never mutates the grid and never
    raises. By default only the lines a candidate touches are rescanned; the
    rest of the board is unchanged and already valid, so the verdict matches
    a full rescan. ``full_rescan=True`` scans every row and column.
    """

    def __init__(self, lexicon: Lexicon, full_rescan: bool = False) -> None:
        self.lexicon = lexicon
        self.full_rescan = full_rescan

    def is_valid(self, grid: LetterGrid, placement: Placement) -> bool:
        if not placement.word or not grid.fits(placement):
            return False

        cells = grid.cells
        dr, dc = placement.direction.step
        row, col = placement.row, placement.col
        overlaps = 0
        standalone = 0
        for i, letter in enumerate(placement.word):
            existing = cells[row + dr * i][col + dc * i]
            if existing == EMPTY:
                standalone += 1
            elif existing != letter:
                return False
            else:
                overlaps += 1

        # Something new must be added, and after the first word every word
        # must cross at least one letter already on the board.
        if standalone == 0:
            return False
        if grid.placement_count > 0 and overlaps == 0:
            return False

        for direction, index in self._lines_to_scan(grid, placement):
            if not self._line_is_valid(grid.line(index, direction, placement)):
                return False
        return True

    def _lines_to_scan(self, grid: LetterGrid, placement: Placement) -> List[Tuple[Direction, int]]:
        if self.full_rescan:
            return [(Direction.ACROSS, r) for r in range(grid.size)] + [
                (Direction.DOWN, c) for c in range(grid.size)
            ]
        direction = placement.direction
        if direction == Direction.ACROSS:
            own, start = placement.row, placement.col
        else:
            own, start = placement.col, placement.row
        crossing = direction.perpendicular
        return [(direction, own)] + [
            (crossing, index) for index in range(start, start + len(placement.word))
        ]

    def _line_is_valid(self, chars: Sequence[str]) -> bool:
        for run in "".join(chars).split(EMPTY):
            if len(run) >= MIN_RUN_LENGTH and not self.lexicon.contains(run):
                return False
        return True


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    def validate(self, grid: LetterGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_runs(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for r in range(grid.size):
            for c in range(grid.size):
                letter = grid.letter(r, c)
                if letter != EMPTY and (len(letter) != 1 or not is_valid_word(letter)):
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_runs(self, grid: LetterGrid) -> None:
        for run in grid.runs():
            if not self.lexicon.contains(run.text):
                raise ValidationError(
                    f"Invalid word '{run.text}' {run.direction.value} at {(run.row, run.col)}"
                )
