"""Aggregation Grouper: buckets entries by normalized trigger text.

One pass per field with a dict keyed by the normalized text. Groups that
occur fewer than ``min_occurrences`` times are never emitted. Output order
is explicit (sorted by trigger text) and never depends on dict insertion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from moodmine.config.engine_config import EngineConfig
from moodmine.engine.text_normalizer import extract_keywords, normalize_text
from moodmine.models.entry import FIELD_ORDER, MoodEntry
from moodmine.models.results import Pattern

logger = logging.getLogger(__name__)


@dataclass
class GroupStats:
    """Running totals for one trigger text."""
    count: int = 0
    total_happiness: float = 0.0
    total_motivation: float = 0.0
    entry_ids: list = field(default_factory=list)

    def add(self, entry: MoodEntry) -> None:
        self.count += 1
        self.total_happiness += entry.y
        self.total_motivation += entry.x
        self.entry_ids.append(entry.id)

    @property
    def avg_happiness(self) -> float:
        return self.total_happiness / self.count if self.count > 0 else 0.0

    @property
    def avg_motivation(self) -> float:
        return self.total_motivation / self.count if self.count > 0 else 0.0


def accumulate(
    entries: Iterable[MoodEntry],
    keys_for: Callable[[MoodEntry], Sequence[str]],
) -> dict[str, GroupStats]:
    """Accumulate per-key totals. Empty keys are skipped."""
    groups: dict[str, GroupStats] = {}
    for entry in entries:
        for key in keys_for(entry):
            if not key:
                continue
            groups.setdefault(key, GroupStats()).add(entry)
    return groups


@dataclass
class AggregationGrouper:
    config: EngineConfig = field(default_factory=EngineConfig)

    def _to_patterns(self, field_kind: str, groups: dict[str, GroupStats]) -> list[Pattern]:
        patterns = [
            Pattern(
                field_kind=field_kind,
                trigger_text=key,
                avg_happiness=stats.avg_happiness,
                avg_motivation=stats.avg_motivation,
                occurrence_count=stats.count,
                entry_ids=list(stats.entry_ids),
            )
            for key, stats in groups.items()
            if stats.count >= self.config.min_occurrences
        ]
        return sorted(patterns, key=lambda p: p.trigger_text)

    def group_field(self, entries: Iterable[MoodEntry], field_kind: str) -> list[Pattern]:
        """Group one text field by its normalized phrase."""
        max_len = self.config.max_text_length
        groups = accumulate(
            entries,
            lambda e: (normalize_text(e.text_for(field_kind), max_len),),
        )
        patterns = self._to_patterns(field_kind, groups)
        logger.debug(
            "Field %s: %d distinct triggers, %d above gate",
            field_kind, len(groups), len(patterns),
        )
        return patterns

    def group_keywords(self, entries: Iterable[MoodEntry], field_kind: str) -> list[Pattern]:
        """Group one text field by individual keywords instead of whole phrases."""
        min_len = self.config.keyword_min_length
        groups = accumulate(
            entries,
            lambda e: extract_keywords(e.text_for(field_kind), min_len),
        )
        return self._to_patterns(field_kind, groups)

    def analyze_patterns(self, entries: Sequence[MoodEntry]) -> list[Pattern]:
        """Gated phrase patterns for focus, self-talk and physical, in that order.

        Returns nothing until the history reaches ``min_entries``.
        """
        if len(entries) < self.config.min_entries:
            return []
        patterns: list[Pattern] = []
        for field_kind in FIELD_ORDER:
            patterns.extend(self.group_field(entries, field_kind))
        logger.info("Found %d patterns across %d entries", len(patterns), len(entries))
        return patterns

    def top_patterns(self, patterns: Iterable[Pattern], limit: int | None = None) -> list[Pattern]:
        """Most frequent patterns first; ties by trigger text."""
        limit = self.config.top_pattern_limit if limit is None else limit
        ranked = sorted(patterns, key=lambda p: (-p.occurrence_count, p.trigger_text))
        return ranked[:limit]
