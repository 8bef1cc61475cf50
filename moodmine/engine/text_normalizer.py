"""Text canonicalization used as the grouping key for pattern mining."""

from __future__ import annotations

import re

MAX_NORMALIZED_LENGTH = 100

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None, max_length: int = MAX_NORMALIZED_LENGTH) -> str:
    """lowercase -> trim -> strip punctuation -> collapse spaces -> truncate.

    The order matters: punctuation is removed after trimming, so a string
    such as ``"  !hello "`` normalizes to ``"hello"`` while ``"a ! b"``
    becomes ``"a b"``.
    """
    if not text:
        return ""
    result = text.lower().strip()
    result = _NON_WORD.sub("", result)
    result = _WHITESPACE.sub(" ", result)
    return result[:max_length]


def extract_keywords(text: str | None, min_length: int = 4) -> list[str]:
    """Split normalized text into keywords, dropping short tokens.

    Tokens shorter than ``min_length`` characters are discarded (the default
    drops anything of length <= 3). Duplicates are kept in order.
    """
    return [tok for tok in normalize_text(text).split() if len(tok) >= min_length]
