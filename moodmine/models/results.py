"""Output records produced by the engine.

All of these are plain values: computed fresh per call, never cached,
serializable with ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Optional


class InsightKind:
    CORRELATION = "correlation"
    TREND = "trend"
    SUGGESTION = "suggestion"
    WARNING = "warning"
    POSITIVE = "positive"
    NEUTRAL = "neutral"


class SuggestionKind:
    REFRAME = "reframe"
    CELEBRATE = "celebrate"
    EXPLORE = "explore"
    PRACTICE = "practice"


class TrendDirection:
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass
class Pattern:
    field_kind: str                 # focus | self_talk | physical
    trigger_text: str               # normalized grouping key
    avg_happiness: float
    avg_motivation: float
    occurrence_count: int
    entry_ids: list = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Insight:
    kind: str
    title: str
    description: str
    confidence: float               # 0.0-1.0
    related_entry_ids: Optional[list] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class SentimentScoreSet:
    focus: float
    self_talk: float
    physical: float
    overall: float
    notes: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CoachingSuggestion:
    kind: str
    title: str
    message: str
    tips: list
    based_on: str                   # sentiment | combination

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class DistortionResult:
    distortion: str
    description: str
    reframe: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class TrendResult:
    trend: str
    average: float
    volatility: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class TimeOfDayResult:
    best_hour: Optional[int]
    best_hour_average: Optional[float]
    best_day: Optional[int]         # 0=Sunday..6=Saturday
    best_day_name: Optional[str]
    best_day_average: Optional[float]
    hour_averages: dict = field(default_factory=dict)
    day_averages: dict = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def sort_by_confidence(insights: list[Insight]) -> list[Insight]:
    """Stable sort, highest confidence first."""
    return sorted(insights, key=lambda i: -i.confidence)
