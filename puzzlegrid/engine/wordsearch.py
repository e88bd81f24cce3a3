"""Word-search grid placement.

Words are placed longest first along randomly chosen allowed directions.
Each word gets a bounded number of random tries and is dropped when none
succeeds, so the returned grid may hold fewer words than requested. Empty
cells are then filled with random letters.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import UNIFORM_FILL_LETTERS, WEIGHTED_FILL_LETTERS, Bounds, Direction
from ..core.models import PlacedWord, WordSearchResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100

# Working grids use "" for an unfilled cell.
EMPTY = ""


def can_place_word(
    grid: Sequence[Sequence[str]],
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction | str,
) -> bool:
    """Return True when ``word`` fits at the given start along ``direction``.

    Every cell on the path must be inside the grid and either empty or
    already holding the letter the word needs there.
    """

    dr, dc = Direction(direction).delta
    bounds = Bounds(rows=len(grid), cols=len(grid[0]) if grid else 0)
    for index, letter in enumerate(word):
        row = start_row + index * dr
        col = start_col + index * dc
        if not bounds.contains(row, col):
            return False
        existing = grid[row][col]
        if existing != EMPTY and existing != letter:
            return False
    return True


def _write_word(grid: List[List[str]], placed: PlacedWord) -> None:
    for letter, (row, col) in zip(placed.word, placed.cells()):
        grid[row][col] = letter


class WordSearchPlacer:
    """Places words into a rectangular letter grid."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.max_attempts = max_attempts

    def generate(
        self,
        words: Sequence[str],
        cols: int,
        directions: Sequence[Direction | str],
        weighted_fill: bool = True,
        rows: Optional[int] = None,
    ) -> WordSearchResult:
        rows = cols if rows is None else rows
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        allowed = [Direction(direction) for direction in directions]
        grid: List[List[str]] = [[EMPTY] * cols for _ in range(rows)]
        placed_words: List[PlacedWord] = []

        for word in sorted(words, key=len, reverse=True):
            placed = self._place_word(grid, word, allowed, rows, cols)
            if placed is None:
                LOGGER.debug("Skipping '%s' after %d attempts", word, self.max_attempts)
                continue
            _write_word(grid, placed)
            placed_words.append(placed)

        self._fill_empty(grid, weighted_fill)
        LOGGER.info(
            "Placed %d/%d words in %dx%d word search", len(placed_words), len(words), rows, cols
        )
        return WordSearchResult(
            grid=tuple(tuple(row) for row in grid),
            placed_words=tuple(placed_words),
        )

    def _place_word(
        self,
        grid: List[List[str]],
        word: str,
        allowed: Sequence[Direction],
        rows: int,
        cols: int,
    ) -> Optional[PlacedWord]:
        if not word or not allowed:
            return None
        shuffled = list(allowed)
        self.rng.shuffle(shuffled)
        for attempt in range(self.max_attempts):
            direction = shuffled[attempt % len(shuffled)]
            start_row = self.rng.randrange(rows)
            start_col = self.rng.randrange(cols)
            if can_place_word(grid, word, start_row, start_col, direction):
                return PlacedWord(word, start_row, start_col, direction)
        return None

    def _fill_empty(self, grid: List[List[str]], weighted_fill: bool) -> None:
        alphabet = WEIGHTED_FILL_LETTERS if weighted_fill else UNIFORM_FILL_LETTERS
        for row in grid:
            for col, letter in enumerate(row):
                if letter == EMPTY:
                    row[col] = self.rng.choice(alphabet)


def generate_word_search(
    words: Sequence[str],
    cols: int,
    directions: Sequence[Direction | str],
    weighted_fill: bool = True,
    rows: Optional[int] = None,
    seed: Optional[int] = None,
) -> WordSearchResult:
    """One-shot helper around :class:`WordSearchPlacer`."""

    return WordSearchPlacer(seed=seed).generate(words, cols, directions, weighted_fill, rows)


__all__ = ["MAX_PLACEMENT_ATTEMPTS", "WordSearchPlacer", "can_place_word", "generate_word_search"]
