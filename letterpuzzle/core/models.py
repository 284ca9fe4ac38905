"""Data models supporting the letter puzzle generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Placement:
    """A candidate word position, evaluated and then committed or discarded."""

    direction: Direction
    row: int
    col: int
    word: str
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            dr, dc = self.direction.step
            object.__setattr__(
                self, "_cells", [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]
            )
        return self._cells

    def letter_at(self, row: int, col: int) -> str | None:
        """Return the word's letter covering ``(row, col)``, if any."""
        if self.direction == Direction.ACROSS:
            if row != self.row or not self.col <= col < self.col + len(self.word):
                return None
            return self.word[col - self.col]
        if col != self.col or not self.row <= row < self.row + len(self.word):
            return None
        return self.word[row - self.row]


@dataclass(frozen=True)
class Run:
    """A maximal stretch of letters along a row or column."""

    direction: Direction
    row: int
    col: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)
