"""Crossword placement via greedy intersection search.

Each attempt shuffles the candidates, seeds the longest one across the middle
row and then places every remaining word at its best-scoring legal position.
The attempt that places the most words wins; its letter grid is converted to
numbered :class:`CrosswordCell` rows with matching clues.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.constants import Bounds, ClueDirection
from ..core.exceptions import PlacementFailure
from ..core.models import CrosswordCell, CrosswordClue, CrosswordResult, WordCandidate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

MAX_ATTEMPTS = 5
INTERSECTION_WEIGHT = 10

LetterGrid = List[List[Optional[str]]]
CandidateLike = Union[WordCandidate, Mapping[str, Any], str]


@dataclass(frozen=True)
class Placement:
    row: int
    col: int
    direction: ClueDirection
    score: float


@dataclass(frozen=True)
class PlacedEntry:
    candidate: WordCandidate
    direction: ClueDirection
    start_row: int
    start_col: int


def _as_candidate(word: CandidateLike) -> WordCandidate:
    if isinstance(word, WordCandidate):
        return word
    if isinstance(word, str):
        return WordCandidate(word=word)
    return WordCandidate.from_mapping(word)


def _is_filled(grid: LetterGrid, bounds: Bounds, row: int, col: int) -> bool:
    return bounds.contains(row, col) and grid[row][col] is not None


def can_place(
    grid: LetterGrid,
    word: str,
    start_row: int,
    start_col: int,
    direction: ClueDirection,
) -> bool:
    """Check whether ``word`` may go at the given start.

    The squares just before and just after the word must be free, every
    covered square must be empty or already hold the same letter, and each
    empty covered square must have free neighbours on both perpendicular
    sides. Unless the grid is still blank the word must cross at least one
    existing letter.
    """

    size = len(grid)
    bounds = Bounds(rows=size, cols=size)
    dr, dc = direction.delta
    end_row = start_row + dr * (len(word) - 1)
    end_col = start_col + dc * (len(word) - 1)
    if not (bounds.contains(start_row, start_col) and bounds.contains(end_row, end_col)):
        return False
    if _is_filled(grid, bounds, start_row - dr, start_col - dc):
        return False
    if _is_filled(grid, bounds, end_row + dr, end_col + dc):
        return False

    pr, pc = direction.perpendicular
    intersections = 0
    for index, letter in enumerate(word):
        row = start_row + index * dr
        col = start_col + index * dc
        existing = grid[row][col]
        if existing is not None:
            if existing != letter:
                return False
            intersections += 1
        elif _is_filled(grid, bounds, row + pr, col + pc) or _is_filled(
            grid, bounds, row - pr, col - pc
        ):
            return False

    return intersections > 0 or all(cell is None for line in grid for cell in line)


def score_placement(
    grid: LetterGrid, word: str, start_row: int, start_col: int, direction: ClueDirection
) -> float:
    """Intersections weighted by ten, minus the word's distance from centre."""

    size = len(grid)
    dr, dc = direction.delta
    intersections = sum(
        1
        for index in range(len(word))
        if grid[start_row + index * dr][start_col + index * dc] is not None
    )
    center_distance = abs(start_row + dr * len(word) / 2 - size / 2) + abs(
        start_col + dc * len(word) / 2 - size / 2
    )
    return intersections * INTERSECTION_WEIGHT - center_distance


def find_placements(grid: LetterGrid, word: str) -> List[Placement]:
    """All legal placements for ``word``, best score first."""

    size = len(grid)
    placements: List[Placement] = []
    for direction in ClueDirection:
        for row in range(size):
            for col in range(size):
                if not can_place(grid, word, row, col, direction):
                    continue
                score = score_placement(grid, word, row, col, direction)
                placements.append(Placement(row, col, direction, score))
    # sort() is stable, so equal scores keep enumeration order.
    placements.sort(key=lambda placement: placement.score, reverse=True)
    return placements


def _write_word(grid: LetterGrid, entry: PlacedEntry) -> None:
    dr, dc = entry.direction.delta
    for index, letter in enumerate(entry.candidate.word):
        grid[entry.start_row + index * dr][entry.start_col + index * dc] = letter


def number_grid(
    letter_grid: LetterGrid, placed: Sequence[PlacedEntry]
) -> Tuple[Tuple[Tuple[CrosswordCell, ...], ...], Tuple[CrosswordClue, ...]]:
    """Number word starts in row-major order and tag each covered square."""

    starts: Dict[Tuple[int, int], Dict[ClueDirection, PlacedEntry]] = {}
    for entry in placed:
        starts.setdefault((entry.start_row, entry.start_col), {})[entry.direction] = entry

    numbers: Dict[Tuple[int, int], int] = {}
    clues: List[CrosswordClue] = []
    for number, position in enumerate(sorted(starts), start=1):
        numbers[position] = number
        for direction in ClueDirection:
            entry = starts[position].get(direction)
            if entry is None:
                continue
            clues.append(
                CrosswordClue(
                    number=number,
                    direction=direction,
                    clue=entry.candidate.clue,
                    answer=entry.candidate.word,
                    start_row=entry.start_row,
                    start_col=entry.start_col,
                    length=len(entry.candidate.word),
                )
            )

    across: Dict[Tuple[int, int], int] = {}
    down: Dict[Tuple[int, int], int] = {}
    for clue in clues:
        owner = across if clue.direction is ClueDirection.ACROSS else down
        for cell in clue.cells():
            owner[cell] = clue.number

    grid = tuple(
        tuple(
            CrosswordCell(
                letter=letter,
                number=numbers.get((row, col)),
                across_clue_num=across.get((row, col)),
                down_clue_num=down.get((row, col)),
            )
            for col, letter in enumerate(line)
        )
        for row, line in enumerate(letter_grid)
    )
    return grid, tuple(clues)


class CrosswordPlacer:
    """Builds a square crossword from candidate words."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.max_attempts = max_attempts

    def generate(
        self,
        words: Sequence[CandidateLike],
        grid_size: int,
        min_words: int,
    ) -> CrosswordResult:
        if grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {grid_size}")
        candidates = [_as_candidate(word) for word in words]

        best: Optional[Tuple[List[PlacedEntry], LetterGrid]] = None
        for attempt in range(1, self.max_attempts + 1):
            outcome = self._attempt(candidates, grid_size)
            if outcome is None:
                LOGGER.debug("Attempt %d: no candidate fits a %dx%d grid", attempt, grid_size, grid_size)
                continue
            placed, letter_grid = outcome
            LOGGER.debug("Attempt %d placed %d words", attempt, len(placed))
            if best is None or len(placed) > len(best[0]):
                best = (placed, letter_grid)
            if len(placed) >= min_words:
                break

        if best is None or not best[0]:
            raise PlacementFailure("Could not place any words in crossword grid")

        placed, letter_grid = best
        if len(placed) < min_words:
            LOGGER.warning(
                "Best crossword attempt placed %d words, below minimum %d", len(placed), min_words
            )
        grid, clues = number_grid(letter_grid, placed)
        LOGGER.info("Placed %d/%d words in %dx%d crossword", len(placed), len(candidates), grid_size, grid_size)
        return CrosswordResult(grid=grid, clues=clues, placed_count=len(placed))

    def _attempt(
        self, candidates: Sequence[WordCandidate], grid_size: int
    ) -> Optional[Tuple[List[PlacedEntry], LetterGrid]]:
        shuffled = list(candidates)
        self.rng.shuffle(shuffled)
        fitting = sorted(
            (candidate for candidate in shuffled if 0 < len(candidate.word) <= grid_size),
            key=lambda candidate: len(candidate.word),
            reverse=True,
        )
        if not fitting:
            return None

        letter_grid: LetterGrid = [[None] * grid_size for _ in range(grid_size)]
        first = fitting[0]
        seed_entry = PlacedEntry(
            candidate=first,
            direction=ClueDirection.ACROSS,
            start_row=grid_size // 2,
            start_col=max(0, (grid_size - len(first.word)) // 2),
        )
        _write_word(letter_grid, seed_entry)
        placed = [seed_entry]
        used = {first.word}

        for candidate in fitting[1:]:
            # A repeated word would otherwise overlay its own earlier entry.
            if candidate.word in used:
                continue
            placements = find_placements(letter_grid, candidate.word)
            if not placements:
                continue
            best = placements[0]
            entry = PlacedEntry(candidate, best.direction, best.row, best.col)
            _write_word(letter_grid, entry)
            placed.append(entry)
            used.add(candidate.word)
        return placed, letter_grid


def generate_crossword(
    words: Sequence[CandidateLike],
    grid_size: int,
    min_words: int,
    seed: Optional[int] = None,
) -> CrosswordResult:
    """One-shot helper around :class:`CrosswordPlacer`."""

    return CrosswordPlacer(seed=seed).generate(words, grid_size, min_words)


__all__ = [
    "CrosswordPlacer",
    "Placement",
    "can_place",
    "find_placements",
    "generate_crossword",
    "number_grid",
    "score_placement",
]
