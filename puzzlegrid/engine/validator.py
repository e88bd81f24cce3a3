"""Deterministic integrity checks for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Tuple

from ..core.constants import Bounds, ClueDirection
from ..core.exceptions import PuzzleGridError
from ..core.models import CrosswordResult, WordSearchResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class ValidationError(PuzzleGridError):
    """Raised internally when a puzzle violates an integrity rule."""


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate_word_search(self, result: WordSearchResult) -> ValidationResult:
        return self._run(
            self._check_ws_shape,
            self._check_ws_letters,
            self._check_ws_paths,
            target=result,
        )

    def validate_crossword(self, result: CrosswordResult) -> ValidationResult:
        return self._run(
            self._check_cw_shape,
            self._check_cw_letters,
            self._check_cw_clues,
            self._check_cw_tags,
            self._check_cw_numbering,
            target=result,
        )

    @staticmethod
    def _run(*checks, target) -> ValidationResult:
        try:
            for check in checks:
                check(target)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    # ------------------------------------------------------------------
    # Word search
    # ------------------------------------------------------------------
    def _check_ws_shape(self, result: WordSearchResult) -> None:
        if not result.grid:
            raise ValidationError("Word search grid has no rows")
        widths = {len(row) for row in result.grid}
        if len(widths) != 1:
            raise ValidationError(f"Word search rows have uneven widths {sorted(widths)}")

    def _check_ws_letters(self, result: WordSearchResult) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if len(letter) != 1 or not ("A" <= letter <= "Z"):
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_ws_paths(self, result: WordSearchResult) -> None:
        bounds = Bounds(rows=result.rows, cols=result.cols)
        for placed in result.placed_words:
            letters = []
            for row, col in placed.cells():
                if not bounds.contains(row, col):
                    raise ValidationError(f"'{placed.word}' leaves the grid at ({row},{col})")
                letters.append(result.grid[row][col])
            if "".join(letters) != placed.word:
                raise ValidationError(
                    f"'{placed.word}' reads '{''.join(letters)}' from "
                    f"({placed.start_row},{placed.start_col}) {placed.direction.value}"
                )

    # ------------------------------------------------------------------
    # Crossword
    # ------------------------------------------------------------------
    def _check_cw_shape(self, result: CrosswordResult) -> None:
        size = len(result.grid)
        if size == 0 or any(len(row) != size for row in result.grid):
            raise ValidationError("Crossword grid must be a non-empty square")

    def _check_cw_letters(self, result: CrosswordResult) -> None:
        for r, row in enumerate(result.grid):
            for c, cell in enumerate(row):
                if cell.letter is None:
                    continue
                if len(cell.letter) != 1 or not ("A" <= cell.letter <= "Z"):
                    raise ValidationError(f"Invalid letter '{cell.letter}' at ({r},{c})")

    def _check_cw_clues(self, result: CrosswordResult) -> None:
        bounds = Bounds(rows=result.size, cols=result.size)
        for clue in result.clues:
            if clue.length != len(clue.answer):
                raise ValidationError(
                    f"Clue {clue.number} {clue.direction.value} length {clue.length} "
                    f"does not match '{clue.answer}'"
                )
            letters = []
            for row, col in clue.cells():
                if not bounds.contains(row, col):
                    raise ValidationError(f"Clue {clue.number} leaves the grid at ({row},{col})")
                letters.append(result.grid[row][col].letter or "")
            if "".join(letters) != clue.answer:
                raise ValidationError(
                    f"Clue {clue.number} {clue.direction.value} reads '{''.join(letters)}', "
                    f"expected '{clue.answer}'"
                )

    def _check_cw_tags(self, result: CrosswordResult) -> None:
        known: Set[Tuple[int, ClueDirection]] = {
            (clue.number, clue.direction) for clue in result.clues
        }
        for r, row in enumerate(result.grid):
            for c, cell in enumerate(row):
                if cell.across_clue_num is not None and (
                    cell.across_clue_num,
                    ClueDirection.ACROSS,
                ) not in known:
                    raise ValidationError(f"Cell ({r},{c}) tagged with unknown across {cell.across_clue_num}")
                if cell.down_clue_num is not None and (
                    cell.down_clue_num,
                    ClueDirection.DOWN,
                ) not in known:
                    raise ValidationError(f"Cell ({r},{c}) tagged with unknown down {cell.down_clue_num}")

    def _check_cw_numbering(self, result: CrosswordResult) -> None:
        expected = 1
        for r, row in enumerate(result.grid):
            for c, cell in enumerate(row):
                if cell.number is None:
                    continue
                if cell.number != expected:
                    raise ValidationError(
                        f"Cell ({r},{c}) numbered {cell.number}, expected {expected}"
                    )
                expected += 1
        for clue in result.clues:
            if result.grid[clue.start_row][clue.start_col].number != clue.number:
                raise ValidationError(
                    f"Clue {clue.number} {clue.direction.value} starts on an unnumbered cell"
                )
        starts = {(clue.start_row, clue.start_col) for clue in result.clues}
        if len(starts) != expected - 1:
            raise ValidationError(
                f"{expected - 1} numbered cells but {len(starts)} distinct clue starts"
            )
