"""Lexicon: the word list drawn from and the oracle every run is checked against."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple

from ..utils.logger import get_logger
from .normalization import is_valid_word, normalize_word
from .sources import DEFAULT_TIMEOUT_SECONDS, load_words


LOGGER = get_logger(__name__)


@dataclass
class LexiconConfig:
    """Configuration for lexicon loading and filtering."""

    source: Path | str
    min_length: int = 1
    max_length: Optional[int] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


class Lexicon:
    """Immutable set of lowercase words plus the ordered list used for draws.

    Membership is a case-insensitive, whole-string comparison. The ``words``
    tuple keeps the source order and any duplicates, so a word listed twice is
    drawn twice as often.
    """

    def __init__(self, words: Iterable[str], config: Optional[LexiconConfig] = None) -> None:
        self.config = config
        min_length = config.min_length if config else 1
        max_length = config.max_length if config else None

        kept = []
        rejected = 0
        for raw in words:
            word = normalize_word(raw) if isinstance(raw, str) else ""
            if not is_valid_word(word):
                rejected += 1
                continue
            if len(word) < min_length or (max_length is not None and len(word) > max_length):
                rejected += 1
                continue
            kept.append(word)

        self._words: Tuple[str, ...] = tuple(kept)
        self._word_set: FrozenSet[str] = frozenset(kept)
        if rejected:
            LOGGER.debug("Dropped %d entries that are not plain a-z words", rejected)
        if not self._word_set:
            LOGGER.warning("Lexicon is empty; generation will produce empty grids")

    @classmethod
    def from_config(cls, config: LexiconConfig) -> "Lexicon":
        return cls(load_words(config.source, config.timeout_seconds), config)

    @classmethod
    def from_source(cls, source: Path | str) -> "Lexicon":
        return cls.from_config(LexiconConfig(source=source))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def is_usable(self) -> bool:
        return bool(self._word_set)

    def contains(self, word: str) -> bool:
        return word.lower() in self._word_set

    def size(self) -> int:
        return len(self._word_set)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Lexicon(size={self.size()}, entries={len(self._words)})"
