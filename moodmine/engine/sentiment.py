"""Sentiment scoring for mood entry text.

Each text field is passed to a lexicon valence function (raw, unbounded),
halved and clamped into [-5, 5]. The overall score weights the three
mandatory fields and optionally blends in the notes score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from moodmine.config.engine_config import EngineConfig
from moodmine.engine.lexicon import ValenceFunction, lexicon_valence
from moodmine.models.entry import MoodEntry
from moodmine.models.results import SentimentScoreSet

logger = logging.getLogger(__name__)


# Evaluated top-down, first match wins. The last two bounds are exclusive.
SENTIMENT_LABELS: list[tuple[str, float, bool]] = [
    # (label, bound, inclusive)
    ("Very Positive", 3.0, True),
    ("Positive", 1.5, True),
    ("Slightly Positive", 0.5, True),
    ("Neutral", -0.5, False),
    ("Slightly Negative", -1.5, False),
    ("Negative", -3.0, False),
]


def get_sentiment_label(score: float) -> str:
    """Map a [-5, 5] score onto a display label."""
    for label, bound, inclusive in SENTIMENT_LABELS:
        if (score >= bound) if inclusive else (score > bound):
            return label
    return "Very Negative"


@dataclass
class SentimentScorer:
    """Scores free text through an injected valence primitive."""

    config: EngineConfig = field(default_factory=EngineConfig)
    valence: ValenceFunction = lexicon_valence

    def analyze_sentiment(self, text: Optional[str]) -> float:
        """Score one piece of text. Blank text is exactly 0."""
        if not text or not text.strip():
            return 0.0
        raw = self.valence(text)
        limit = self.config.score_limit
        normalized = max(-limit, min(limit, raw / self.config.valence_divisor))
        return round(normalized, 2)

    def analyze_mood_sentiment(
        self,
        focus: Optional[str],
        self_talk: Optional[str],
        physical: Optional[str],
        notes: Optional[str] = None,
    ) -> SentimentScoreSet:
        """Score all text fields of an entry and combine them."""
        cfg = self.config
        focus_score = self.analyze_sentiment(focus)
        self_talk_score = self.analyze_sentiment(self_talk)
        physical_score = self.analyze_sentiment(physical)
        has_notes = bool(notes)
        notes_score = self.analyze_sentiment(notes) if has_notes else None

        overall = (
            focus_score * cfg.focus_weight
            + self_talk_score * cfg.self_talk_weight
            + physical_score * cfg.physical_weight
        )
        if notes_score is not None:
            overall = overall * (1 - cfg.notes_blend) + notes_score * cfg.notes_blend

        return SentimentScoreSet(
            focus=focus_score,
            self_talk=self_talk_score,
            physical=physical_score,
            notes=notes_score,
            overall=round(overall, 2),
        )

    def score_entry(self, entry: MoodEntry) -> SentimentScoreSet:
        return self.analyze_mood_sentiment(
            entry.focus, entry.self_talk, entry.physical_sensations, entry.notes,
        )

    def score_series(self, entries: Iterable[MoodEntry]) -> list[float]:
        """Overall scores in chronological order (ties broken by entry id)."""
        ordered = sorted(entries, key=lambda e: (e.timestamp, e.id))
        scores = [self.score_entry(e).overall for e in ordered]
        logger.debug("Scored %d entries for trend analysis", len(scores))
        return scores
