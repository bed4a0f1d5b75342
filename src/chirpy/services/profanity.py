"""Masking of banned words in post bodies."""

from __future__ import annotations

from typing import Final

BANNED_WORDS: Final[frozenset[str]] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK: Final[str] = "****"


def clean_profane(text: str) -> str:
    """Replace banned words with ``****``.

    Words are split on single spaces and compared case-insensitively. A word
    with punctuation attached (``"fornax!"``) is not a match.
    """
    words = text.split(" ")
    return " ".join(MASK if word.lower() in BANNED_WORDS else word for word in words)
