"""Tunable thresholds for the pattern and insight engine.

Every number the analytics layer compares against lives here so that a
single ``EngineConfig`` can be injected into each component.
"""

from __future__ import annotations

from dataclasses import dataclass

from moodmine.config import settings


@dataclass(frozen=True)
class EngineConfig:
    # Grouping / gating
    min_occurrences: int = 3
    min_entries: int = 10
    min_entries_self_talk: int = 20
    top_pattern_limit: int = 5
    keyword_min_length: int = 4
    max_text_length: int = 100

    # Correlation thresholds (coordinates are 0..1)
    high_happiness: float = 0.7
    low_happiness: float = 0.4
    low_motivation: float = 0.4
    winning_threshold: float = 0.7
    correlation_confidence_divisor: float = 10.0
    winning_confidence_divisor: float = 15.0

    # Baseline-relative variant
    booster_multiplier: float = 1.2
    negative_self_talk_multiplier: float = 0.8
    physical_high_multiplier: float = 1.25
    physical_low_multiplier: float = 0.75
    physical_min_matches: int = 5
    max_baseline_insights: int = 3

    # Sentiment
    focus_weight: float = 0.2
    self_talk_weight: float = 0.5
    physical_weight: float = 0.3
    notes_blend: float = 0.1
    valence_divisor: float = 2.0
    score_limit: float = 5.0

    # Coaching
    reframe_threshold: float = -1.0
    celebrate_threshold: float = 2.0
    dissonance_overall_threshold: float = 1.0
    neutral_band: float = 1.0

    # Trend
    trend_slope_threshold: float = 0.1
    min_trend_points: int = 3

    def __post_init__(self):
        total = self.focus_weight + self.self_talk_weight + self.physical_weight
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Field weights must sum to 1.0, got {total:.4f}")
        for name in ("min_occurrences", "min_entries", "min_entries_self_talk",
                     "physical_min_matches", "max_baseline_insights", "min_trend_points"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")
        if self.valence_divisor <= 0 or self.score_limit <= 0:
            raise ValueError("valence_divisor and score_limit must be positive")

    @classmethod
    def from_settings(cls) -> EngineConfig:
        """Build a config from the environment-driven settings module."""
        return cls(
            min_occurrences=settings.MIN_OCCURRENCES,
            min_entries=settings.MIN_ENTRIES,
            min_entries_self_talk=settings.MIN_ENTRIES_SELF_TALK,
            max_baseline_insights=settings.MAX_BASELINE_INSIGHTS,
            focus_weight=settings.FOCUS_WEIGHT,
            self_talk_weight=settings.SELF_TALK_WEIGHT,
            physical_weight=settings.PHYSICAL_WEIGHT,
            notes_blend=settings.NOTES_BLEND,
            trend_slope_threshold=settings.TREND_SLOPE_THRESHOLD,
        )
