"""End-to-end puzzle assembly around an external word generator.

The placers are never retried on identical input. When a content attempt
yields too few words, or the crossword placer cannot place anything, the
builder asks the provider for a fresh batch instead.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from ..core.constants import Difficulty
from ..core.exceptions import ContentExhaustedError, ContentParseError, PlacementFailure
from ..core.models import CrosswordCell, CrosswordClue, PlacedWord, WordCandidate
from ..core.presets import crossword_preset, word_search_preset
from ..data.content import ContentPayload, parse_content_payload
from ..data.word_list import WordListConfig, normalize_word_list
from ..utils.logger import get_logger
from .crossword import CrosswordPlacer
from .wordsearch import WordSearchPlacer


LOGGER = get_logger(__name__)

MAX_CONTENT_ATTEMPTS = 3


class ContentProvider(Protocol):
    """Anything that returns raw generator text for a topic."""

    def fetch(
        self,
        topic: str,
        difficulty: Difficulty,
        focus_categories: Sequence[str],
        attempt: int,
    ) -> str:
        ...


@dataclass(frozen=True)
class PlacedWordEntry:
    """Word-search placement merged with its clue metadata."""

    candidate: WordCandidate
    placement: PlacedWord

    def to_dict(self) -> Dict[str, Any]:
        payload = self.candidate.to_dict()
        payload.update(self.placement.to_dict())
        return payload


@dataclass(frozen=True)
class WordSearchPuzzle:
    title: str
    grid: Tuple[Tuple[str, ...], ...]
    words: Tuple[PlacedWordEntry, ...]
    grid_size: int
    fun_fact: str
    difficulty: Difficulty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "grid": [list(row) for row in self.grid],
            "words": [entry.to_dict() for entry in self.words],
            "gridSize": self.grid_size,
            "funFact": self.fun_fact,
            "difficulty": self.difficulty.value,
        }


@dataclass(frozen=True)
class CrosswordPuzzle:
    title: str
    grid: Tuple[Tuple[CrosswordCell, ...], ...]
    clues: Tuple[CrosswordClue, ...]
    placed_count: int
    grid_size: int
    fun_fact: str
    difficulty: Difficulty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "clues": [clue.to_dict() for clue in self.clues],
            "placedCount": self.placed_count,
            "gridSize": self.grid_size,
            "funFact": self.fun_fact,
            "difficulty": self.difficulty.value,
        }


class PuzzleBuilder:
    """Fetches content, validates it and hands it to a placer."""

    def __init__(
        self,
        provider: ContentProvider,
        max_content_attempts: int = MAX_CONTENT_ATTEMPTS,
        seed: Optional[int] = None,
    ) -> None:
        self.provider = provider
        self.max_content_attempts = max_content_attempts
        self.rng = random.Random(seed)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def build_word_search(
        self,
        topic: str,
        difficulty: Difficulty | str,
        focus_categories: Sequence[str],
    ) -> WordSearchPuzzle:
        difficulty = Difficulty(difficulty)
        preset = word_search_preset(difficulty)
        placer = WordSearchPlacer(rng=self.rng)

        for attempt in range(1, self.max_content_attempts + 1):
            # The last attempt accepts any category the generator returned.
            categories = None if attempt == self.max_content_attempts else focus_categories
            fetched = self._fetch_words(
                topic,
                difficulty,
                focus_categories,
                attempt,
                WordListConfig(
                    min_words=preset.min_words,
                    max_words=preset.max_words,
                    focus_categories=categories,
                ),
            )
            if fetched is None:
                continue
            payload, words = fetched
            result = placer.generate(
                [word.word for word in words],
                preset.grid_size,
                preset.directions,
                preset.weighted_fill,
            )
            by_word = {word.word: word for word in words}
            entries = tuple(
                PlacedWordEntry(candidate=by_word[placed.word], placement=placed)
                for placed in result.placed_words
            )
            return WordSearchPuzzle(
                title=payload.title,
                grid=result.grid,
                words=entries,
                grid_size=preset.grid_size,
                fun_fact=payload.fun_fact,
                difficulty=difficulty,
            )
        raise ContentExhaustedError(
            f"Couldn't generate enough words for '{topic}'. Try something broader."
        )

    def build_crossword(
        self,
        topic: str,
        difficulty: Difficulty | str,
        focus_categories: Sequence[str],
    ) -> CrosswordPuzzle:
        difficulty = Difficulty(difficulty)
        preset = crossword_preset(difficulty)
        placer = CrosswordPlacer(rng=self.rng)

        for attempt in range(1, self.max_content_attempts + 1):
            # The last attempt accepts any category the generator returned.
            categories = None if attempt == self.max_content_attempts else focus_categories
            fetched = self._fetch_words(
                topic,
                difficulty,
                focus_categories,
                attempt,
                WordListConfig(
                    min_words=preset.min_words,
                    max_words=preset.candidate_words,
                    max_word_length=min(12, preset.grid_size),
                    focus_categories=categories,
                ),
            )
            if fetched is None:
                continue
            payload, words = fetched
            try:
                result = placer.generate(words, preset.grid_size, preset.min_words)
            except PlacementFailure as exc:
                LOGGER.warning("Content attempt %d unplaceable: %s", attempt, exc)
                continue
            return CrosswordPuzzle(
                title=payload.title,
                grid=result.grid,
                clues=result.clues,
                placed_count=result.placed_count,
                grid_size=preset.grid_size,
                fun_fact=payload.fun_fact,
                difficulty=difficulty,
            )
        raise ContentExhaustedError(
            f"Couldn't generate a crossword for '{topic}'. Try something broader."
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _fetch_words(
        self,
        topic: str,
        difficulty: Difficulty,
        focus_categories: Sequence[str],
        attempt: int,
        config: WordListConfig,
    ) -> Optional[Tuple[ContentPayload, List[WordCandidate]]]:
        LOGGER.info("Content attempt %s/%s for '%s'", attempt, self.max_content_attempts, topic)
        raw = self.provider.fetch(topic, difficulty, focus_categories, attempt)
        try:
            payload = parse_content_payload(raw)
        except ContentParseError as exc:
            LOGGER.warning("Content attempt %d unusable: %s", attempt, exc)
            return None
        words = normalize_word_list(payload.words, config)
        if not config.is_sufficient(words):
            LOGGER.warning(
                "Content attempt %d yielded %d/%d usable words",
                attempt,
                len(words),
                config.min_words,
            )
            return None
        return payload, words


__all__ = [
    "ContentProvider",
    "CrosswordPuzzle",
    "PlacedWordEntry",
    "PuzzleBuilder",
    "WordSearchPuzzle",
]
