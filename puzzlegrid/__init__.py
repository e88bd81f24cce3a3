"""Puzzle grid synthesis for word-search and crossword games.

This package exposes the public API surface via:

- ``puzzlegrid.data.word_list.normalize_word_list``: cleans raw candidate lists.
- ``puzzlegrid.engine.wordsearch.WordSearchPlacer``: 8-direction word-search grids.
- ``puzzlegrid.engine.crossword.CrosswordPlacer``: numbered crossword grids.
- ``puzzlegrid.engine.builder.PuzzleBuilder``: content retries around either placer.

Both placers are synchronous and keep no state between calls beyond their
random number generator.
"""

from .core.constants import ClueDirection, Difficulty, Direction
from .core.exceptions import PlacementFailure, PuzzleGridError
from .core.models import (
    CrosswordCell,
    CrosswordClue,
    CrosswordResult,
    PlacedWord,
    WordCandidate,
    WordSearchResult,
)
from .data.word_list import WordListConfig, WordListNormalizer, normalize_word_list
from .engine.crossword import CrosswordPlacer, generate_crossword
from .engine.wordsearch import WordSearchPlacer, generate_word_search

__all__ = [
    "ClueDirection",
    "CrosswordCell",
    "CrosswordClue",
    "CrosswordPlacer",
    "CrosswordResult",
    "Difficulty",
    "Direction",
    "PlacedWord",
    "PlacementFailure",
    "PuzzleGridError",
    "WordCandidate",
    "WordListConfig",
    "WordListNormalizer",
    "WordSearchPlacer",
    "WordSearchResult",
    "generate_crossword",
    "generate_word_search",
    "normalize_word_list",
]

__version__ = "0.1.0"
