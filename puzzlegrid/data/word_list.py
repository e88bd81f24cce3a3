"""Validation and cleanup of raw candidate word lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set, Union

from ..core.models import WordCandidate
from ..utils.logger import get_logger
from .normalization import clean_word, normalize_category


LOGGER = get_logger(__name__)

RawCandidate = Union[WordCandidate, Mapping[str, Any]]


@dataclass
class WordListConfig:
    """Bounds applied to a candidate list before it reaches a placer."""

    min_words: int
    max_words: int
    min_word_length: int = 3
    max_word_length: int = 12
    # None disables the category filter entirely.
    focus_categories: Optional[Sequence[str]] = None

    def is_sufficient(self, words: Sequence[WordCandidate]) -> bool:
        return len(words) >= self.min_words


class WordListNormalizer:
    """Cleans, filters and truncates candidate words.

    There is no failure path: the result may be empty or shorter than
    ``min_words`` and callers decide whether it is usable.
    """

    def __init__(self, config: WordListConfig) -> None:
        self.config = config
        self._allowed_categories: Optional[Set[str]] = None
        if config.focus_categories is not None:
            self._allowed_categories = {
                normalize_category(category) for category in config.focus_categories
            }

    def normalize(self, candidates: Iterable[RawCandidate]) -> List[WordCandidate]:
        accepted: List[WordCandidate] = []
        seen: Set[str] = set()
        for raw in candidates:
            candidate = raw if isinstance(raw, WordCandidate) else _from_mapping(raw)
            word = clean_word(candidate.word)
            if not self.config.min_word_length <= len(word) <= self.config.max_word_length:
                LOGGER.debug("Dropping '%s': length %d out of bounds", candidate.word, len(word))
                continue
            if word in seen:
                LOGGER.debug("Dropping duplicate '%s'", word)
                continue
            seen.add(word)
            if not self._category_allowed(candidate.category):
                LOGGER.debug("Dropping '%s': category '%s' not requested", word, candidate.category)
                continue
            accepted.append(
                WordCandidate(
                    word=word,
                    clue=candidate.clue,
                    category=candidate.category,
                    difficulty=candidate.difficulty,
                )
            )

        kept = accepted[: self.config.max_words]
        if len(kept) < self.config.min_words:
            LOGGER.info(
                "Word list below minimum after normalization (%d/%d)",
                len(kept),
                self.config.min_words,
            )
        return kept

    def _category_allowed(self, category: str) -> bool:
        if self._allowed_categories is None:
            return True
        return normalize_category(category) in self._allowed_categories


def _from_mapping(raw: Mapping[str, Any]) -> WordCandidate:
    try:
        return WordCandidate.from_mapping(raw)
    except (TypeError, ValueError):
        LOGGER.debug("Unreadable difficulty %r for '%s', using tier 1", raw.get("difficulty"), raw.get("word"))
        return WordCandidate.from_mapping({**raw, "difficulty": 1})


def normalize_word_list(
    candidates: Iterable[RawCandidate], config: WordListConfig
) -> List[WordCandidate]:
    """Functional shortcut for :class:`WordListNormalizer`."""

    return WordListNormalizer(config).normalize(candidates)


__all__ = ["WordListConfig", "WordListNormalizer", "normalize_word_list"]
