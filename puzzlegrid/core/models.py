"""Data models produced and consumed by the grid engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .constants import ClueDirection, Direction


@dataclass(frozen=True)
class WordCandidate:
    """A topic word with its clue metadata."""

    word: str
    clue: str = ""
    category: str = ""
    difficulty: int = 1

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "WordCandidate":
        return cls(
            word=str(payload.get("word") or ""),
            clue=str(payload.get("clue") or ""),
            category=str(payload.get("category") or ""),
            difficulty=int(payload.get("difficulty") or 1),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "clue": self.clue,
            "category": self.category,
            "difficulty": self.difficulty,
        }


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the word-search grid."""

    word: str
    start_row: int
    start_col: int
    direction: Direction

    def cells(self) -> Iterator[Tuple[int, int]]:
        dr, dc = self.direction.delta
        for index in range(len(self.word)):
            yield self.start_row + index * dr, self.start_col + index * dc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class WordSearchResult:
    grid: Tuple[Tuple[str, ...], ...]
    placed_words: Tuple[PlacedWord, ...]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "placedWords": [placed.to_dict() for placed in self.placed_words],
        }


@dataclass(frozen=True)
class CrosswordCell:
    """A crossword square; ``letter`` is ``None`` for blocked squares."""

    letter: Optional[str] = None
    number: Optional[int] = None
    across_clue_num: Optional[int] = None
    down_clue_num: Optional[int] = None

    @property
    def is_blocked(self) -> bool:
        return self.letter is None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"letter": self.letter}
        if self.number is not None:
            payload["number"] = self.number
        if self.across_clue_num is not None:
            payload["acrossClueNum"] = self.across_clue_num
        if self.down_clue_num is not None:
            payload["downClueNum"] = self.down_clue_num
        return payload


@dataclass(frozen=True)
class CrosswordClue:
    number: int
    direction: ClueDirection
    clue: str
    answer: str
    start_row: int
    start_col: int
    length: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        dr, dc = self.direction.delta
        for index in range(self.length):
            yield self.start_row + index * dr, self.start_col + index * dc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "direction": self.direction.value,
            "clue": self.clue,
            "answer": self.answer,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "length": self.length,
        }


@dataclass(frozen=True)
class CrosswordResult:
    grid: Tuple[Tuple[CrosswordCell, ...], ...]
    clues: Tuple[CrosswordClue, ...]
    placed_count: int

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def across_clues(self) -> List[CrosswordClue]:
        return [clue for clue in self.clues if clue.direction is ClueDirection.ACROSS]

    @property
    def down_clues(self) -> List[CrosswordClue]:
        return [clue for clue in self.clues if clue.direction is ClueDirection.DOWN]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "clues": [clue.to_dict() for clue in self.clues],
            "placedCount": self.placed_count,
        }
