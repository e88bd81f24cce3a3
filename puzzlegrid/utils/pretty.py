"""Pretty-print helpers for generated grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..core.models import CrosswordCell, CrosswordResult, WordSearchResult


BLOCKED_SYMBOL = "#"


def _render_rows(rows: Sequence[Sequence[str]]) -> str:
    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{symbol:>2}" for symbol in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def cell_symbol(cell: CrosswordCell) -> str:
    return cell.letter or BLOCKED_SYMBOL


def format_word_search(result: WordSearchResult) -> str:
    return _render_rows(result.grid)


def format_crossword(result: CrosswordResult) -> str:
    return _render_rows([[cell_symbol(cell) for cell in row] for row in result.grid])


def print_word_search(result: WordSearchResult, *, stream=None) -> None:
    """Print a word-search grid followed by its placements."""

    stream = stream or sys.stdout
    print(format_word_search(result), file=stream)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placed_words)}", file=stream)
    directions = Counter(placed.direction.value for placed in result.placed_words)
    if directions:
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    for placed in sorted(result.placed_words, key=lambda p: p.word):
        print(
            f"  {placed.word:<12} ({placed.start_row},{placed.start_col}) {placed.direction.value}",
            file=stream,
        )


def print_crossword(result: CrosswordResult, *, stream=None) -> None:
    """Print a crossword grid with across and down clue lists."""

    stream = stream or sys.stdout
    print(format_crossword(result), file=stream)

    total_cells = result.size * result.size
    letter_cells = sum(1 for row in result.grid for cell in row if not cell.is_blocked)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.size} x {result.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Words placed:  {result.placed_count}", file=stream)

    for label, clues in (("Across", result.across_clues), ("Down", result.down_clues)):
        print(file=stream)
        print(f"--- {label} ---", file=stream)
        for clue in clues:
            print(f"  {clue.number:>2}. {clue.clue} ({clue.length})  [{clue.answer}]", file=stream)
