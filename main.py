"""CLI entrypoint for the word-search and crossword grid generators."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from puzzlegrid.core.constants import Difficulty, Direction
from puzzlegrid.core.exceptions import ContentParseError, PlacementFailure
from puzzlegrid.core.models import WordCandidate
from puzzlegrid.core.presets import crossword_preset, word_search_preset
from puzzlegrid.data.content import parse_content_payload
from puzzlegrid.data.word_list import WordListConfig, normalize_word_list
from puzzlegrid.engine.crossword import CrosswordPlacer
from puzzlegrid.engine.validator import PuzzleValidator
from puzzlegrid.engine.wordsearch import WordSearchPlacer
from puzzlegrid.utils.logger import configure_logging, get_logger
from puzzlegrid.utils.pretty import print_crossword, print_word_search


LOGGER = get_logger("puzzlegrid.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_word_entry(entry: str) -> WordCandidate:
    """Turn ``WORD`` or ``WORD:Clue`` into a candidate."""
    word, _, clue = entry.partition(":")
    return WordCandidate(word=word.strip(), clue=clue.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word-search and crossword grids from topic words",
    )
    parser.add_argument(
        "puzzle",
        choices=["wordsearch", "crossword"],
        help="Kind of grid to generate",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--content-file",
        type=Path,
        metavar="FILE",
        help="Raw word-generator output (JSON with title, words, funFact)",
    )
    parser.add_argument(
        "--categories",
        nargs="+",
        metavar="CATEGORY",
        help="Keep only words from these categories (content files only)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Difficulty preset supplying grid size and word limits",
    )
    parser.add_argument("--grid-size", type=int, help="Override preset grid size (columns)")
    parser.add_argument("--rows", type=int, help="Word-search rows (defaults to grid size)")
    parser.add_argument(
        "--directions",
        nargs="+",
        choices=[d.value for d in Direction],
        help="Override preset word-search directions",
    )
    parser.add_argument(
        "--uniform-fill",
        action="store_true",
        help="Fill word-search blanks uniformly instead of by letter frequency",
    )
    parser.add_argument("--min-words", type=int, help="Override preset minimum word count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print a human-readable grid to stderr as well",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_candidates(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Dict[str, Any]:
    raw: List[WordCandidate] = []
    meta: Dict[str, Any] = {}
    if args.words:
        raw.extend(parse_word_entry(entry) for entry in args.words)
    if args.words_file:
        raw.extend(parse_word_entry(entry) for entry in parse_words_file(args.words_file))
    if args.content_file:
        try:
            payload = parse_content_payload(args.content_file.read_text(encoding="utf-8"))
        except ContentParseError as exc:
            parser.error(f"{args.content_file}: {exc}")
        raw.extend(payload.words)
        meta = {"title": payload.title, "funFact": payload.fun_fact}
    if not raw:
        parser.error("provide at least one of --words, --words-file or --content-file")
    return {"candidates": raw, "meta": meta}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.puzzle == "crossword" and (args.rows or args.directions or args.uniform_fill):
        parser.error("--rows, --directions and --uniform-fill only apply to wordsearch")

    collected = collect_candidates(args, parser)
    validator = PuzzleValidator()

    if args.puzzle == "wordsearch":
        preset = word_search_preset(args.difficulty)
        cols = args.grid_size or preset.grid_size
        config = WordListConfig(
            min_words=preset.min_words if args.min_words is None else args.min_words,
            max_words=preset.max_words,
            focus_categories=args.categories,
        )
        words = normalize_word_list(collected["candidates"], config)
        result = WordSearchPlacer(seed=args.seed).generate(
            [word.word for word in words],
            cols,
            args.directions or preset.directions,
            weighted_fill=preset.weighted_fill and not args.uniform_fill,
            rows=args.rows,
        )
        validation = validator.validate_word_search(result)
        if args.pretty:
            print_word_search(result, stream=sys.stderr)
    else:
        preset = crossword_preset(args.difficulty)
        grid_size = args.grid_size or preset.grid_size
        config = WordListConfig(
            min_words=preset.min_words if args.min_words is None else args.min_words,
            max_words=preset.candidate_words,
            max_word_length=min(12, grid_size),
            focus_categories=args.categories,
        )
        words = normalize_word_list(collected["candidates"], config)
        try:
            result = CrosswordPlacer(seed=args.seed).generate(words, grid_size, config.min_words)
        except PlacementFailure as exc:
            LOGGER.error("%s", exc)
            raise SystemExit(1) from exc
        validation = validator.validate_crossword(result)
        if args.pretty:
            print_crossword(result, stream=sys.stderr)

    if not config.is_sufficient(words):
        LOGGER.warning("Only %d usable words (minimum %d)", len(words), config.min_words)

    payload: Dict[str, Any] = dict(collected["meta"])
    payload.update(result.to_dict())
    payload["difficulty"] = args.difficulty
    payload["validation"] = validation.messages

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
