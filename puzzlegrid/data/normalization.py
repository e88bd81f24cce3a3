"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with everything outside ``A-Z`` removed.

    Accented Latin letters are folded to their base letter first, so
    ``"Café"`` becomes ``"CAFE"`` rather than ``"CAF"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


def normalize_category(category: str) -> str:
    return (category or "").strip().casefold()


__all__ = ["clean_word", "normalize_category"]
