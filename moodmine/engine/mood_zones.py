"""Descriptive helpers for a (motivation, happiness) coordinate."""

from __future__ import annotations

import statistics
from typing import Optional, Sequence

from moodmine.models.entry import MoodEntry

ZONE_HAPPY_MOTIVATED = "Happy & Motivated"
ZONE_HAPPY_UNMOTIVATED = "Happy & Unmotivated"
ZONE_UNHAPPY_MOTIVATED = "Unhappy & Motivated"
ZONE_UNHAPPY_UNMOTIVATED = "Unhappy & Unmotivated"

# (lower bound, happiness text, motivation text), checked top-down
_BANDS = [
    (0.75, "Very happy", "highly motivated"),
    (0.50, "Moderately happy", "motivated"),
    (0.25, "Somewhat unhappy", "somewhat unmotivated"),
]


def get_mood_zone(x: float, y: float) -> str:
    """Quadrant for motivation ``x`` and happiness ``y``; 0.5 counts as high."""
    happy = y >= 0.5
    motivated = x >= 0.5
    if happy and motivated:
        return ZONE_HAPPY_MOTIVATED
    if happy:
        return ZONE_HAPPY_UNMOTIVATED
    if motivated:
        return ZONE_UNHAPPY_MOTIVATED
    return ZONE_UNHAPPY_UNMOTIVATED


def get_mood_description(x: float, y: float) -> str:
    happiness_text = next((h for bound, h, _ in _BANDS if y >= bound), "Unhappy")
    motivation_text = next((m for bound, _, m in _BANDS if x >= bound), "unmotivated")
    return f"{happiness_text}, {motivation_text}"


def calculate_average_mood(entries: Sequence[MoodEntry]) -> Optional[tuple[float, float]]:
    """Mean (x, y) of the entries, or None for an empty list."""
    if not entries:
        return None
    return (
        statistics.fmean(e.x for e in entries),
        statistics.fmean(e.y for e in entries),
    )
