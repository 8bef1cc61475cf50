"""Correlation Insight Generator: turns grouped aggregates into insights.

Two variants share one config:

* ``generate_insights``: absolute thresholds on the gated phrase groups
  (happiness booster, mood trigger, body-mind link, winning pattern).
  Confidence grows with the number of supporting entries.
* ``generate_baseline_insights``: compares against the user's own mean
  happiness and scans fixed self-talk phrases and sensation words.
  Capped at ``max_baseline_insights``.

Both always return insights sorted by confidence, highest first.
"""

from __future__ import annotations

import logging
import statistics
from dataclasses import dataclass, field
from typing import Optional, Sequence

from moodmine.config.engine_config import EngineConfig
from moodmine.engine.aggregation import AggregationGrouper, accumulate
from moodmine.engine.text_normalizer import normalize_text
from moodmine.models.entry import FIELD_ORDER, FieldKind, MoodEntry
from moodmine.models.results import Insight, InsightKind, Pattern, sort_by_confidence

logger = logging.getLogger(__name__)

NEGATIVE_SELF_TALK_PHRASES: tuple[str, ...] = (
    "should be", "never", "always fails", "can't", "impossible",
)
PHYSICAL_SENSATIONS: tuple[str, ...] = (
    "tense", "relaxed", "energized", "tired", "calm", "restless",
)


def _pct(value: float) -> int:
    """0..1 ratio -> whole percent."""
    return round(value * 100)


@dataclass
class CorrelationInsightGenerator:
    config: EngineConfig = field(default_factory=EngineConfig)
    grouper: Optional[AggregationGrouper] = None

    def __post_init__(self):
        if self.grouper is None:
            self.grouper = AggregationGrouper(config=self.config)

    def _confidence(self, count: int, divisor: float) -> float:
        return min(count / divisor, 1.0)

    # -- Gate --

    def unlock_message(self, entry_count: int) -> Insight:
        remaining = self.config.min_entries - entry_count
        return Insight(
            kind=InsightKind.SUGGESTION,
            title="Keep tracking!",
            description=(
                f"You've logged {entry_count} entries. Log {remaining} more "
                f"to unlock pattern analysis."
            ),
            confidence=1.0,
        )

    # -- Absolute-threshold variant --

    def generate_insights(
        self,
        entries: Sequence[MoodEntry],
        patterns: Optional[list[Pattern]] = None,
    ) -> list[Insight]:
        """Ranked correlation insights for an entry history.

        An empty history yields no insights; a short one yields only the
        unlock suggestion.
        """
        if not entries:
            return []
        if len(entries) < self.config.min_entries:
            return [self.unlock_message(len(entries))]

        if patterns is None:
            patterns = self.grouper.analyze_patterns(entries)
        by_field = {kind: [p for p in patterns if p.field_kind == kind] for kind in FIELD_ORDER}

        insights: list[Insight] = []
        for finder in (self.find_happiness_booster, self.find_mood_trigger, self.find_body_mind_link):
            insight = finder(by_field)
            if insight is not None:
                insights.append(insight)

        winning = self.find_winning_pattern(patterns)
        if winning is not None:
            insights.append(winning)

        logger.info("Generated %d correlation insights from %d entries", len(insights), len(entries))
        return sort_by_confidence(insights)

    def find_happiness_booster(self, by_field: dict[str, list[Pattern]]) -> Optional[Insight]:
        cfg = self.config
        candidates = [p for p in by_field[FieldKind.FOCUS] if p.avg_happiness > cfg.high_happiness]
        if not candidates:
            return None
        best = min(candidates, key=lambda p: (-p.avg_happiness, p.trigger_text))
        return Insight(
            kind=InsightKind.CORRELATION,
            title="Your Happiness Booster",
            description=(
                f'When you focus on "{best.trigger_text}", your happiness averages '
                f"{_pct(best.avg_happiness)}%. This is "
                f"{_pct(best.avg_happiness - 0.5)}% above your baseline."
            ),
            confidence=self._confidence(best.occurrence_count, cfg.correlation_confidence_divisor),
            related_entry_ids=list(best.entry_ids),
        )

    def find_mood_trigger(self, by_field: dict[str, list[Pattern]]) -> Optional[Insight]:
        cfg = self.config
        candidates = [p for p in by_field[FieldKind.SELF_TALK] if p.avg_happiness < cfg.low_happiness]
        if not candidates:
            return None
        worst = min(candidates, key=lambda p: (p.avg_happiness, p.trigger_text))
        return Insight(
            kind=InsightKind.CORRELATION,
            title="Mood Pattern Detected",
            description=(
                f'When you tell yourself "{worst.trigger_text}", your happiness drops to '
                f"{_pct(worst.avg_happiness)}%. Consider reframing this thought."
            ),
            confidence=self._confidence(worst.occurrence_count, cfg.correlation_confidence_divisor),
            related_entry_ids=list(worst.entry_ids),
        )

    def find_body_mind_link(self, by_field: dict[str, list[Pattern]]) -> Optional[Insight]:
        cfg = self.config
        candidates = [p for p in by_field[FieldKind.PHYSICAL] if p.avg_motivation < cfg.low_motivation]
        if not candidates:
            return None
        lowest = min(candidates, key=lambda p: (p.avg_motivation, p.trigger_text))
        return Insight(
            kind=InsightKind.CORRELATION,
            title="Body-Mind Connection",
            description=(
                f'"{lowest.trigger_text}" appears when your motivation is at '
                f"{_pct(lowest.avg_motivation)}%. Your body might be signaling "
                f"something important."
            ),
            confidence=self._confidence(lowest.occurrence_count, cfg.correlation_confidence_divisor),
            related_entry_ids=list(lowest.entry_ids),
        )

    def find_winning_pattern(self, patterns: list[Pattern]) -> Optional[Insight]:
        cfg = self.config
        threshold = cfg.winning_threshold
        candidates = [
            p for p in patterns
            if p.avg_happiness > threshold or p.avg_motivation > threshold
        ]
        if not candidates:
            return None
        # Ties: field order, then trigger text
        best = min(
            candidates,
            key=lambda p: (
                -(p.avg_happiness + p.avg_motivation),
                FIELD_ORDER.index(p.field_kind),
                p.trigger_text,
            ),
        )
        dimension = "happiness" if best.avg_happiness > best.avg_motivation else "motivation"
        peak = max(best.avg_happiness, best.avg_motivation)
        return Insight(
            kind=InsightKind.TREND,
            title="Your Winning Pattern",
            description=(
                f'Your {best.field_kind.replace("_", " ")} "{best.trigger_text}" '
                f"correlates with high {dimension} ({_pct(peak)}%)."
            ),
            confidence=self._confidence(best.occurrence_count, cfg.winning_confidence_divisor),
            related_entry_ids=list(best.entry_ids),
        )

    # -- Baseline-relative variant --

    def generate_baseline_insights(
        self,
        entries: Sequence[MoodEntry],
        top_focus: Optional[list[Pattern]] = None,
    ) -> list[Insight]:
        """Insights relative to the user's own average happiness.

        ``top_focus`` are the most frequent focus groups (ungated). When
        omitted they are computed from ``entries``.
        """
        cfg = self.config
        if len(entries) < cfg.min_entries:
            return []

        baseline = statistics.fmean(e.y for e in entries)
        if top_focus is None:
            top_focus = self.top_focus_areas(entries)

        insights: list[Insight] = []
        booster = self._baseline_booster(entries, top_focus, baseline)
        if booster is not None:
            insights.append(booster)

        if len(entries) >= cfg.min_entries_self_talk:
            warning = self._self_talk_warning(entries, baseline)
            if warning is not None:
                insights.append(warning)

        insights.extend(self._sensation_signals(entries, baseline))

        kept = insights[: cfg.max_baseline_insights]
        logger.info(
            "Baseline insights: %d generated, %d kept (baseline happiness %.2f)",
            len(insights), len(kept), baseline,
        )
        return sort_by_confidence(kept)

    def top_focus_areas(self, entries: Sequence[MoodEntry]) -> list[Pattern]:
        """Most frequent normalized focus texts, no minimum occurrence."""
        max_len = self.config.max_text_length
        groups = accumulate(entries, lambda e: (normalize_text(e.focus, max_len),))
        patterns = [
            Pattern(
                field_kind=FieldKind.FOCUS,
                trigger_text=key,
                avg_happiness=stats.avg_happiness,
                avg_motivation=stats.avg_motivation,
                occurrence_count=stats.count,
                entry_ids=list(stats.entry_ids),
            )
            for key, stats in groups.items()
        ]
        return self.grouper.top_patterns(patterns)

    def _baseline_booster(
        self,
        entries: Sequence[MoodEntry],
        top_focus: list[Pattern],
        baseline: float,
    ) -> Optional[Insight]:
        if not top_focus or baseline <= 0:
            return None
        best = min(top_focus, key=lambda p: (-p.avg_happiness, p.trigger_text))
        if best.avg_happiness <= baseline * self.config.booster_multiplier:
            return None
        uplift = round((best.avg_happiness - baseline) / baseline * 100)
        return Insight(
            kind=InsightKind.POSITIVE,
            title="Happiness Booster Found",
            description=(
                f'When you focus on "{best.trigger_text}" your happiness is typically '
                f"{uplift}% higher than average."
            ),
            confidence=self._confidence(best.occurrence_count, self.config.correlation_confidence_divisor),
            related_entry_ids=list(best.entry_ids),
        )

    def _self_talk_warning(self, entries: Sequence[MoodEntry], baseline: float) -> Optional[Insight]:
        cfg = self.config
        flagged: list[tuple[str, list[MoodEntry]]] = []
        for phrase in NEGATIVE_SELF_TALK_PHRASES:
            matching = [e for e in entries if phrase in (e.self_talk or "").lower()]
            if len(matching) < cfg.min_occurrences:
                continue
            avg = statistics.fmean(e.y for e in matching)
            if avg < baseline * cfg.negative_self_talk_multiplier:
                flagged.append((phrase, matching))

        if not flagged:
            return None
        # Most frequent phrase; ties keep phrase-list order
        phrase, matching = max(flagged, key=lambda item: len(item[1]))
        return Insight(
            kind=InsightKind.WARNING,
            title="Self-Talk Pattern Detected",
            description=(
                f'The phrase "{phrase}" appears in {len(matching)} entries with '
                f"below-average happiness. Consider reframing this thought pattern."
            ),
            confidence=self._confidence(len(matching), cfg.correlation_confidence_divisor),
            related_entry_ids=[e.id for e in matching],
        )

    def _sensation_signals(self, entries: Sequence[MoodEntry], baseline: float) -> list[Insight]:
        cfg = self.config
        insights: list[Insight] = []
        for sensation in PHYSICAL_SENSATIONS:
            matching = [e for e in entries if sensation in (e.physical_sensations or "").lower()]
            if len(matching) < cfg.physical_min_matches:
                continue
            avg = statistics.fmean(e.y for e in matching)
            confidence = self._confidence(len(matching), cfg.correlation_confidence_divisor)
            ids = [e.id for e in matching]
            if avg > baseline * cfg.physical_high_multiplier:
                insights.append(Insight(
                    kind=InsightKind.POSITIVE,
                    title="Body Wisdom",
                    description=(
                        f'Feeling "{sensation}" appears in {len(matching)} entries with '
                        f"above-average happiness. Your body knows what feels good!"
                    ),
                    confidence=confidence,
                    related_entry_ids=ids,
                ))
            elif avg < baseline * cfg.physical_low_multiplier:
                insights.append(Insight(
                    kind=InsightKind.NEUTRAL,
                    title="Body Signal",
                    description=(
                        f'"{sensation}" appears in {len(matching)} entries with '
                        f"below-average happiness. This might be a signal worth noticing."
                    ),
                    confidence=confidence,
                    related_entry_ids=ids,
                ))
        return insights
