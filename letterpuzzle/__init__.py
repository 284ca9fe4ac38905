"""Letter puzzle generator: dense grids where every run is a dictionary word.

This package exposes the public API surface via:

- ``letterpuzzle.data.lexicon.Lexicon``: the word list and membership oracle.
- ``letterpuzzle.engine.generator.BoardGenerator``: fills one grid by random trials.
- ``letterpuzzle.engine.search.search_best_board``: keeps the densest of many boards.
"""

from .data.lexicon import Lexicon, LexiconConfig
from .engine.generator import BoardGenerator, GenerationResult, GeneratorConfig
from .engine.grid import GridConfig, LetterGrid
from .engine.search import SearchConfig, SearchResult, search_best_board

__all__ = [
    "BoardGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GridConfig",
    "LetterGrid",
    "Lexicon",
    "LexiconConfig",
    "SearchConfig",
    "SearchResult",
    "search_best_board",
]

__version__ = "0.1.0"
