"""InsightEngine: orchestrates all pattern-mining components.

Call ``build_report()`` to compute everything for one user's history.
The engine keeps no state between calls and never mutates the entries
it is given.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional, Sequence

from moodmine.config.engine_config import EngineConfig
from moodmine.engine.aggregation import AggregationGrouper
from moodmine.engine.coaching import get_coaching_suggestions
from moodmine.engine.correlation import CorrelationInsightGenerator
from moodmine.engine.distortions import detect_cognitive_distortions
from moodmine.engine.lexicon import ValenceFunction, lexicon_valence
from moodmine.engine.mood_zones import calculate_average_mood, get_mood_zone
from moodmine.engine.sentiment import SentimentScorer, get_sentiment_label
from moodmine.engine.time_of_day import TimeOfDayAnalyzer
from moodmine.engine.trend import analyze_sentiment_trends
from moodmine.models.entry import MoodEntry

logger = logging.getLogger(__name__)


def start_of_week(now: datetime) -> datetime:
    """Sunday 00:00 of the week containing ``now`` (same tzinfo)."""
    days_since_sunday = now.isoweekday() % 7
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=days_since_sunday)


@dataclass
class InsightEngine:
    config: EngineConfig = field(default_factory=EngineConfig)
    valence: ValenceFunction = lexicon_valence

    def __post_init__(self):
        self.scorer = SentimentScorer(config=self.config, valence=self.valence)
        self.grouper = AggregationGrouper(config=self.config)
        self.correlations = CorrelationInsightGenerator(config=self.config, grouper=self.grouper)
        self.time_of_day = TimeOfDayAnalyzer()

    def summarize(self, entries: Sequence[MoodEntry], now: Optional[datetime] = None) -> dict[str, Any]:
        """Headline stats: counts, dominant mood zone, top focus areas."""
        if not entries:
            return {
                "total_entries": 0,
                "entries_this_week": 0,
                "most_common_zone": "No data yet",
                "top_focus_areas": [],
                "average_mood": None,
            }

        now = now or datetime.now(entries[0].timestamp.tzinfo)
        week_start = start_of_week(now)
        entries_this_week = sum(1 for e in entries if e.timestamp >= week_start)

        # Counter.most_common keeps first-seen order for equal counts
        zones = Counter(get_mood_zone(e.x, e.y) for e in entries)
        most_common_zone = zones.most_common(1)[0][0]

        average = calculate_average_mood(entries)
        return {
            "total_entries": len(entries),
            "entries_this_week": entries_this_week,
            "most_common_zone": most_common_zone,
            "top_focus_areas": [p.to_dict() for p in self.correlations.top_focus_areas(entries)],
            "average_mood": {"x": round(average[0], 4), "y": round(average[1], 4)},
        }

    def analyze_latest(self, entry: MoodEntry) -> dict[str, Any]:
        """Sentiment, coaching and distortions for a single entry."""
        scores = self.scorer.score_entry(entry)
        coaching = get_coaching_suggestions(
            scores.self_talk, entry.self_talk, scores.overall, config=self.config,
        )
        distortions = detect_cognitive_distortions(entry.self_talk)
        return {
            "entry_id": entry.id,
            "sentiment": scores.to_dict(),
            "label": get_sentiment_label(scores.overall),
            "coaching": [c.to_dict() for c in coaching],
            "distortions": [d.to_dict() for d in distortions],
        }

    def build_report(self, entries: Sequence[MoodEntry], now: Optional[datetime] = None) -> dict[str, Any]:
        """Run the full pipeline and return a JSON-serializable report.

        Returns a dict with keys:
            summary: headline stats
            patterns: gated phrase patterns (all fields)
            insights: ranked correlation insights
            baseline_insights: baseline-relative insights (max 3)
            time_of_day: happiest hour / weekday
            sentiment_trend: trend over overall sentiment scores
            latest: per-entry analysis of the newest entry (or None)
        """
        entries = list(entries)  # snapshot; caller's list is untouched
        logger.info("Building report for %d entries", len(entries))

        patterns = self.grouper.analyze_patterns(entries)
        insights = self.correlations.generate_insights(entries, patterns)
        baseline = self.correlations.generate_baseline_insights(entries)
        series = self.scorer.score_series(entries)
        trend = analyze_sentiment_trends(series, config=self.config)

        latest = None
        if entries:
            newest = max(entries, key=lambda e: (e.timestamp, e.id))
            latest = self.analyze_latest(newest)

        return {
            "summary": self.summarize(entries, now=now),
            "patterns": [p.to_dict() for p in patterns],
            "insights": [i.to_dict() for i in insights],
            "baseline_insights": [i.to_dict() for i in baseline],
            "time_of_day": self.time_of_day.analyze(entries).to_dict(),
            "sentiment_trend": trend.to_dict(),
            "latest": latest,
        }
