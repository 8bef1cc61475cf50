"""Time-of-day analysis: which hour and weekday are happiest."""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from moodmine.models.entry import MoodEntry
from moodmine.models.results import TimeOfDayResult

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def sunday_weekday(ts: datetime) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return ts.isoweekday() % 7


def _best_bucket(buckets: dict[int, list[float]]) -> tuple[Optional[int], Optional[float], dict[int, float]]:
    """Highest-mean bucket; empty buckets never compete, ties go to the lowest key."""
    averages = {key: statistics.fmean(values) for key, values in sorted(buckets.items()) if values}
    if not averages:
        return None, None, {}
    best = min(averages, key=lambda k: (-averages[k], k))
    return best, averages[best], averages


@dataclass
class TimeOfDayAnalyzer:
    def analyze(self, entries: Iterable[MoodEntry]) -> TimeOfDayResult:
        hours: dict[int, list[float]] = {}
        days: dict[int, list[float]] = {}
        for entry in entries:
            hours.setdefault(entry.timestamp.hour, []).append(entry.y)
            days.setdefault(sunday_weekday(entry.timestamp), []).append(entry.y)

        best_hour, hour_avg, hour_averages = _best_bucket(hours)
        best_day, day_avg, day_averages = _best_bucket(days)

        return TimeOfDayResult(
            best_hour=best_hour,
            best_hour_average=round(hour_avg, 4) if hour_avg is not None else None,
            best_day=best_day,
            best_day_name=DAY_NAMES[best_day] if best_day is not None else None,
            best_day_average=round(day_avg, 4) if day_avg is not None else None,
            hour_averages={h: round(v, 4) for h, v in hour_averages.items()},
            day_averages={d: round(v, 4) for d, v in day_averages.items()},
        )
