"""Shared constants and enumerations for the grid engines."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Difficulty(str, Enum):
    """Puzzle difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Direction(str, Enum):
    """The eight word-search directions."""

    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    DOWN_RIGHT = "downRight"
    DOWN_LEFT = "downLeft"
    UP_RIGHT = "upRight"
    UP_LEFT = "upLeft"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


class ClueDirection(str, Enum):
    """Crossword entries only run across or down."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def delta(self) -> Tuple[int, int]:
        return (0, 1) if self is ClueDirection.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> Tuple[int, int]:
        return (1, 0) if self is ClueDirection.ACROSS else (0, 1)


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.UP_RIGHT: (-1, 1),
    Direction.UP_LEFT: (-1, -1),
}

ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = (Direction.RIGHT, Direction.DOWN)
ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)

# Approximate English letter frequency; every letter appears at least once.
WEIGHTED_FILL_LETTERS = "EEEETTTAAAOOINNSSHHRDDLLCUUMWFGYPBVKJXQZ"
UNIFORM_FILL_LETTERS = string.ascii_uppercase

COMMON_LETTERS = frozenset("ETAOINSHRDL")
RARE_LETTERS = frozenset("QZXJK")

DIFFICULTY_TIERS = (1, 2, 3)


def get_direction_delta(direction: Direction | str) -> Tuple[int, int]:
    """Return the ``(row, col)`` step for ``direction``."""

    return DIRECTION_STEPS[Direction(direction)]


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
