"""Parsing of raw word-generator output into candidate lists."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, List

from ..core.constants import DIFFICULTY_TIERS
from ..core.exceptions import ContentParseError
from ..core.models import WordCandidate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
FENCE_CLOSE_RE = re.compile(r"\n?```\s*$")

REQUIRED_WORD_FIELDS = ("word", "clue", "category", "difficulty")


@dataclass
class ContentPayload:
    """Title, candidate words and fun fact returned by a word generator."""

    title: str
    words: List[WordCandidate] = field(default_factory=list)
    fun_fact: str = ""


def extract_json_text(raw_text: str) -> str:
    """Strip code fences, preamble and trailing chatter around a JSON object."""

    cleaned = raw_text.strip()
    cleaned = FENCE_CLOSE_RE.sub("", FENCE_OPEN_RE.sub("", cleaned))
    start = cleaned.find("{")
    if start > 0:
        cleaned = cleaned[start:]
    end = cleaned.rfind("}")
    if end >= 0:
        cleaned = cleaned[: end + 1]
    return cleaned


def parse_content_payload(raw_text: str) -> ContentPayload:
    try:
        parsed = json.loads(extract_json_text(raw_text))
    except json.JSONDecodeError as exc:
        raise ContentParseError(f"Generator output is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ContentParseError("Generator output must be a JSON object")

    title = parsed.get("title")
    if not title or not isinstance(title, str):
        raise ContentParseError("Missing or invalid 'title' field")

    entries = parsed.get("words")
    if not isinstance(entries, list) or not entries:
        raise ContentParseError("Missing or empty 'words' array")

    words = [_parse_word_entry(entry) for entry in entries]
    fun_fact = parsed.get("funFact") or ""
    LOGGER.debug("Parsed '%s' with %d candidate words", title, len(words))
    return ContentPayload(title=title, words=words, fun_fact=str(fun_fact))


def _parse_word_entry(entry: Any) -> WordCandidate:
    if not isinstance(entry, dict) or not all(entry.get(key) for key in REQUIRED_WORD_FIELDS):
        raise ContentParseError(f"Invalid word entry: {json.dumps(entry)}")
    try:
        candidate = WordCandidate.from_mapping(entry)
    except (TypeError, ValueError) as exc:
        raise ContentParseError(f"Invalid word entry: {json.dumps(entry)}") from exc
    if candidate.difficulty not in DIFFICULTY_TIERS:
        raise ContentParseError(f"Invalid word entry: {json.dumps(entry)}")
    return candidate


__all__ = ["ContentPayload", "extract_json_text", "parse_content_payload"]
