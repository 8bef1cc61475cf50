"""Tests for the InsightEngine orchestrator."""

import json

import pytest
from datetime import datetime, timezone

from moodmine.config.engine_config import EngineConfig
from moodmine.engine.insight_engine import InsightEngine, start_of_week


@pytest.fixture
def engine(valence):
    return InsightEngine(valence=valence)


REPORT_KEYS = {
    "summary",
    "patterns",
    "insights",
    "baseline_insights",
    "time_of_day",
    "sentiment_trend",
    "latest",
}


# ═══════════════════════════════════════════════════════════════════════════
# Summary
# ═══════════════════════════════════════════════════════════════════════════


class TestSummary:
    def test_start_of_week_is_sunday_midnight(self, frozen_now):
        assert start_of_week(frozen_now) == datetime(2026, 2, 15, tzinfo=timezone.utc)

    def test_counts_and_zone(self, engine, make_entry, frozen_now):
        entries = [
            make_entry(timestamp=datetime(2026, 2, 14, 23, 0, tzinfo=timezone.utc), x=0.9, y=0.9),
            make_entry(timestamp=datetime(2026, 2, 15, 0, 0, tzinfo=timezone.utc), x=0.1, y=0.1),
            make_entry(timestamp=datetime(2026, 2, 17, 8, 0, tzinfo=timezone.utc), x=0.2, y=0.3),
        ]
        summary = engine.summarize(entries, now=frozen_now)
        assert summary["total_entries"] == 3
        assert summary["entries_this_week"] == 2
        assert summary["most_common_zone"] == "Unhappy & Unmotivated"
        assert summary["average_mood"] == {"x": 0.4, "y": pytest.approx(0.4333)}

    def test_top_focus_areas(self, engine, deadline_history, frozen_now):
        summary = engine.summarize(deadline_history, now=frozen_now)
        assert summary["top_focus_areas"][0]["trigger_text"] == "deadline"
        assert summary["top_focus_areas"][0]["occurrence_count"] == 4

    def test_empty(self, engine):
        summary = engine.summarize([])
        assert summary["total_entries"] == 0
        assert summary["most_common_zone"] == "No data yet"
        assert summary["average_mood"] is None


# ═══════════════════════════════════════════════════════════════════════════
# Latest-entry analysis
# ═══════════════════════════════════════════════════════════════════════════


class TestAnalyzeLatest:
    def test_negative_absolute_self_talk(self, engine, make_entry):
        entry = make_entry(self_talk="I hate that I never succeed", focus="", physical_sensations="")
        result = engine.analyze_latest(entry)
        assert result["sentiment"]["self_talk"] == -1.5
        assert result["sentiment"]["overall"] == -0.75
        assert result["label"] == "Slightly Negative"
        assert [c["kind"] for c in result["coaching"]] == ["reframe"]
        assert [d["distortion"] for d in result["distortions"]] == ["All-or-Nothing Thinking"]

    def test_positive_entry_celebrates(self, engine, make_entry):
        entry = make_entry(self_talk="great and happy", focus="good work", physical_sensations="calm")
        result = engine.analyze_latest(entry)
        assert result["sentiment"]["self_talk"] == 3.0
        assert [c["kind"] for c in result["coaching"]] == ["celebrate"]
        assert result["distortions"] == []


# ═══════════════════════════════════════════════════════════════════════════
# Full report
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildReport:
    def test_report_shape(self, engine, deadline_history, frozen_now):
        report = engine.build_report(deadline_history, now=frozen_now)
        assert set(report) == REPORT_KEYS
        assert report["summary"]["total_entries"] == 12

    def test_deadline_pattern_and_booster(self, engine, deadline_history, frozen_now):
        report = engine.build_report(deadline_history, now=frozen_now)
        [pattern] = report["patterns"]
        assert pattern["field_kind"] == "focus"
        assert pattern["trigger_text"] == "deadline"
        assert pattern["occurrence_count"] == 4
        assert report["insights"][0]["title"] == "Your Happiness Booster"
        assert report["insights"][0]["confidence"] == pytest.approx(0.4)

    def test_latest_is_newest_entry(self, engine, deadline_history, frozen_now):
        report = engine.build_report(list(reversed(deadline_history)), now=frozen_now)
        assert report["latest"]["entry_id"] == deadline_history[-1].id

    def test_deterministic_and_serializable(self, engine, deadline_history, frozen_now):
        first = json.dumps(engine.build_report(deadline_history, now=frozen_now), sort_keys=True)
        second = json.dumps(engine.build_report(deadline_history, now=frozen_now), sort_keys=True)
        assert first == second

    def test_does_not_mutate_input(self, engine, deadline_history, frozen_now):
        order = [e.id for e in deadline_history]
        before = [e.to_dict() for e in deadline_history]
        engine.build_report(deadline_history, now=frozen_now)
        assert [e.id for e in deadline_history] == order
        assert [e.to_dict() for e in deadline_history] == before

    def test_empty_history(self, engine):
        report = engine.build_report([])
        assert report["patterns"] == []
        assert report["insights"] == []
        assert report["baseline_insights"] == []
        assert report["latest"] is None
        assert report["sentiment_trend"] == {"trend": "stable", "average": 0, "volatility": 0}
        assert report["time_of_day"]["best_hour"] is None

    def test_short_history_unlock_message(self, engine, make_entry):
        report = engine.build_report([make_entry() for _ in range(4)])
        assert [i["kind"] for i in report["insights"]] == ["suggestion"]
        assert report["patterns"] == []

    def test_improving_sentiment_trend(self, engine, make_entry):
        texts = ["awful", "bad", "", "good", "great"]
        entries = [
            make_entry(self_talk=t, focus="", physical_sensations="") for t in texts
        ]
        assert engine.build_report(entries)["sentiment_trend"]["trend"] == "improving"

    def test_custom_config_flows_through(self, valence, make_entry):
        engine = InsightEngine(config=EngineConfig(min_entries=3, min_occurrences=2), valence=valence)
        entries = [make_entry(focus="run", y=0.9) for _ in range(3)]
        report = engine.build_report(entries)
        assert report["patterns"][0]["trigger_text"] == "run"
        assert any(i["title"] == "Your Happiness Booster" for i in report["insights"])
