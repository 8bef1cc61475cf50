"""Shared test fixtures for the moodmine test suite."""

import pytest
from datetime import datetime, timedelta, timezone

from moodmine.config.engine_config import EngineConfig
from moodmine.models.entry import MoodEntry


# ── Valence ─────────────────────────────────────────────────────────────

FAKE_LEXICON = {
    "great": 3.0,
    "good": 2.0,
    "happy": 3.0,
    "calm": 2.0,
    "love": 3.0,
    "bad": -2.0,
    "tense": -2.0,
    "tired": -2.0,
    "hate": -3.0,
    "awful": -3.0,
    "worthless": -4.0,
}


def fake_valence(text: str) -> float:
    """Deterministic stand-in for the lexicon: sums known words."""
    return float(sum(FAKE_LEXICON.get(word.strip(".,!?"), 0.0) for word in text.lower().split()))


@pytest.fixture
def valence():
    return fake_valence


@pytest.fixture
def config():
    return EngineConfig()


# ── Time Freezing ───────────────────────────────────────────────────────

@pytest.fixture
def frozen_now():
    """Fixed 'now' for deterministic week-window tests.

    Default: 2026-02-18T12:00:00Z (noon UTC on a Wednesday).
    """
    return datetime(2026, 2, 18, 12, 0, 0, tzinfo=timezone.utc)


# ── Entry Factories ─────────────────────────────────────────────────────

@pytest.fixture
def make_entry():
    """Factory fixture that creates MoodEntry instances with sensible defaults.

    Usage:
        entry = make_entry(focus="Work", y=0.8)
    """
    _counter = 0
    base = datetime(2026, 2, 1, 9, 0, 0, tzinfo=timezone.utc)

    def _factory(**overrides):
        nonlocal _counter
        _counter += 1
        defaults = {
            "id": f"entry-{_counter:03d}",
            "timestamp": base + timedelta(hours=_counter),
            "x": 0.5,
            "y": 0.5,
            "focus": f"focus {_counter}",
            "self_talk": f"self talk {_counter}",
            "physical_sensations": f"sensation {_counter}",
        }
        defaults.update(overrides)
        return MoodEntry(**defaults)

    return _factory


@pytest.fixture
def deadline_history(make_entry):
    """12 entries; 4 share the focus 'Deadline!' with mean happiness 0.8."""
    entries = [
        make_entry(focus=text, y=y, x=0.5)
        for text, y in [
            ("Deadline!", 0.7),
            ("deadline", 0.9),
            ("  DEADLINE ", 0.8),
            ("deadline.", 0.8),
        ]
    ]
    entries += [make_entry(y=0.5, x=0.5) for _ in range(8)]
    return entries
