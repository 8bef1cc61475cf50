"""Default lexicon valence primitive backed by the VADER lexicon.

Returns the raw, unbounded sum of word valences for a piece of text. A word
directly preceded by a negator ("not", "don't", "never", ...) has its valence
flipped. Scoring and clamping happen in ``moodmine.engine.sentiment``.
"""

from __future__ import annotations

import re
from typing import Callable

from vaderSentiment.vaderSentiment import NEGATE, SentimentIntensityAnalyzer

ValenceFunction = Callable[[str], float]

_analyzer = SentimentIntensityAnalyzer()
_TOKEN = re.compile(r"[a-z']+")
_NEGATORS = frozenset(NEGATE)


def lexicon_valence(text: str) -> float:
    """Sum of lexicon valences for every token in ``text``."""
    if not text or not text.strip():
        return 0.0

    total = 0.0
    previous = ""
    for token in _TOKEN.findall(text.lower()):
        token = token.strip("'")
        valence = _analyzer.lexicon.get(token, 0.0)
        if valence and previous in _NEGATORS:
            valence = -valence
        total += valence
        previous = token
    return total
