"""Per-difficulty grid settings handed to the placers by callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import ALL_DIRECTIONS, ORTHOGONAL_DIRECTIONS, Difficulty, Direction


@dataclass(frozen=True)
class WordSearchPreset:
    grid_size: int
    min_words: int
    max_words: int
    directions: Tuple[Direction, ...]
    weighted_fill: bool
    label: str
    description: str = ""


@dataclass(frozen=True)
class CrosswordPreset:
    grid_size: int
    min_words: int
    candidate_words: int
    label: str


WORD_SEARCH_PRESETS: Dict[Difficulty, WordSearchPreset] = {
    Difficulty.EASY: WordSearchPreset(
        grid_size=12,
        min_words=10,
        max_words=12,
        directions=ORTHOGONAL_DIRECTIONS,
        weighted_fill=True,
        label="Easy",
        description="12x12 grid, 10-12 words, horizontal and vertical only",
    ),
    Difficulty.MEDIUM: WordSearchPreset(
        grid_size=15,
        min_words=15,
        max_words=18,
        directions=ALL_DIRECTIONS,
        weighted_fill=True,
        label="Medium",
        description="15x15 grid, 15-18 words, all 8 directions",
    ),
    Difficulty.HARD: WordSearchPreset(
        grid_size=18,
        min_words=18,
        max_words=22,
        directions=ALL_DIRECTIONS,
        weighted_fill=False,
        label="Hard",
        description="18x18 grid, 18-22 words, all 8 directions, includes obscure terms",
    ),
}

CROSSWORD_PRESETS: Dict[Difficulty, CrosswordPreset] = {
    Difficulty.EASY: CrosswordPreset(grid_size=5, min_words=3, candidate_words=10, label="Easy"),
    Difficulty.MEDIUM: CrosswordPreset(grid_size=7, min_words=4, candidate_words=14, label="Medium"),
    Difficulty.HARD: CrosswordPreset(grid_size=9, min_words=6, candidate_words=18, label="Hard"),
}


def word_search_preset(difficulty: Difficulty | str) -> WordSearchPreset:
    return WORD_SEARCH_PRESETS[Difficulty(difficulty)]


def crossword_preset(difficulty: Difficulty | str) -> CrosswordPreset:
    return CROSSWORD_PRESETS[Difficulty(difficulty)]
