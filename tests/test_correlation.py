"""Tests for the correlation insight generator (both variants)."""

import json

import pytest

from moodmine.engine.correlation import CorrelationInsightGenerator


@pytest.fixture
def generator():
    return CorrelationInsightGenerator()


def kinds(insights):
    return [i.kind for i in insights]


# ═══════════════════════════════════════════════════════════════════════════
# Minimum-sample gate
# ═══════════════════════════════════════════════════════════════════════════


class TestGate:
    def test_empty_history_has_no_insights(self, generator):
        assert generator.generate_insights([]) == []

    @pytest.mark.parametrize("count", [1, 7, 9])
    def test_short_history_gets_unlock_message(self, generator, make_entry, count):
        entries = [make_entry() for _ in range(count)]
        insights = generator.generate_insights(entries)
        assert len(insights) == 1
        assert insights[0].kind == "suggestion"
        assert f"Log {10 - count} more" in insights[0].description
        assert insights[0].confidence == 1.0


# ═══════════════════════════════════════════════════════════════════════════
# Absolute-threshold insights
# ═══════════════════════════════════════════════════════════════════════════


class TestGenerateInsights:
    def test_deadline_booster(self, generator, deadline_history):
        insights = generator.generate_insights(deadline_history)
        booster = insights[0]
        assert booster.kind == "correlation"
        assert booster.title == "Your Happiness Booster"
        assert booster.confidence == pytest.approx(0.4)
        assert '"deadline"' in booster.description
        assert "averages 80%" in booster.description
        assert booster.related_entry_ids == [e.id for e in deadline_history[:4]]

    def test_winning_pattern_follows_booster(self, generator, deadline_history):
        insights = generator.generate_insights(deadline_history)
        assert kinds(insights) == ["correlation", "trend"]
        winning = insights[1]
        assert winning.confidence == pytest.approx(4 / 15)
        assert "high happiness (80%)" in winning.description

    def test_mood_trigger_picks_lowest(self, generator, make_entry):
        entries = (
            [make_entry(self_talk="I am useless", y=0.2) for _ in range(3)]
            + [make_entry(self_talk="Whatever.", y=0.3) for _ in range(3)]
            + [make_entry() for _ in range(4)]
        )
        insights = generator.generate_insights(entries)
        assert len(insights) == 1
        assert insights[0].title == "Mood Pattern Detected"
        assert '"i am useless"' in insights[0].description
        assert "drops to 20%" in insights[0].description
        assert insights[0].confidence == pytest.approx(0.3)

    def test_body_mind_link(self, generator, make_entry):
        entries = (
            [make_entry(physical_sensations="Heavy legs", x=0.1) for _ in range(5)]
            + [make_entry() for _ in range(5)]
        )
        insights = generator.generate_insights(entries)
        assert [i.title for i in insights] == ["Body-Mind Connection"]
        assert "motivation is at 10%" in insights[0].description
        assert insights[0].confidence == pytest.approx(0.5)

    def test_winning_pattern_reports_larger_dimension(self, generator, make_entry):
        entries = (
            [make_entry(self_talk="let's go", x=0.9, y=0.6) for _ in range(3)]
            + [make_entry() for _ in range(7)]
        )
        [insight] = generator.generate_insights(entries)
        assert insight.kind == "trend"
        assert insight.description == 'Your self talk "lets go" correlates with high motivation (90%).'

    def test_equal_dimensions_report_motivation(self, generator, make_entry):
        entries = (
            [make_entry(focus="chess", x=0.8, y=0.8) for _ in range(3)]
            + [make_entry() for _ in range(7)]
        )
        insights = generator.generate_insights(entries)
        winning = [i for i in insights if i.kind == "trend"][0]
        assert "high motivation" in winning.description

    def test_sorted_by_confidence(self, generator, make_entry):
        entries = (
            [make_entry(focus="garden", y=0.9) for _ in range(3)]
            + [make_entry(self_talk="i give up", y=0.1) for _ in range(6)]
            + [make_entry() for _ in range(3)]
        )
        insights = generator.generate_insights(entries)
        confidences = [i.confidence for i in insights]
        assert confidences == sorted(confidences, reverse=True)
        assert insights[0].title == "Mood Pattern Detected"

    def test_no_patterns_no_insights(self, generator, make_entry):
        entries = [make_entry() for _ in range(12)]
        assert generator.generate_insights(entries) == []

    def test_deterministic(self, generator, deadline_history):
        first = [i.to_dict() for i in generator.generate_insights(deadline_history)]
        second = [i.to_dict() for i in generator.generate_insights(deadline_history)]
        assert json.dumps(first) == json.dumps(second)


# ═══════════════════════════════════════════════════════════════════════════
# Baseline-relative insights
# ═══════════════════════════════════════════════════════════════════════════


class TestBaselineInsights:
    def test_needs_minimum_entries(self, generator, make_entry):
        assert generator.generate_baseline_insights([make_entry() for _ in range(9)]) == []

    def test_focus_uplift(self, generator, make_entry):
        entries = (
            [make_entry(focus="Yoga", y=0.9) for _ in range(3)]
            + [make_entry(y=0.4) for _ in range(7)]
        )
        [insight] = generator.generate_baseline_insights(entries)
        assert insight.kind == "positive"
        assert insight.title == "Happiness Booster Found"
        # baseline 0.55 -> (0.9 - 0.55) / 0.55 = 64%
        assert "64% higher than average" in insight.description
        assert insight.confidence == pytest.approx(0.3)

    def test_self_talk_phrase_warning(self, generator, make_entry):
        entries = (
            [make_entry(self_talk="I can't do it", y=0.1) for _ in range(4)]
            + [make_entry(y=0.5) for _ in range(16)]
        )
        [insight] = generator.generate_baseline_insights(entries)
        assert insight.kind == "warning"
        assert insight.description.startswith('The phrase "can\'t" appears in 4 entries')
        assert len(insight.related_entry_ids) == 4

    def test_self_talk_scan_needs_twenty_entries(self, generator, make_entry):
        entries = (
            [make_entry(self_talk="I can't do it", y=0.1) for _ in range(4)]
            + [make_entry(y=0.5) for _ in range(15)]
        )
        assert "warning" not in kinds(generator.generate_baseline_insights(entries))

    def test_sensation_signals(self, generator, make_entry):
        entries = (
            [make_entry(physical_sensations="feeling relaxed", y=0.9) for _ in range(5)]
            + [make_entry(physical_sensations="so tired today", y=0.2) for _ in range(5)]
        )
        insights = generator.generate_baseline_insights(entries)
        assert [i.title for i in insights] == ["Body Wisdom", "Body Signal", "Happiness Booster Found"]
        assert kinds(insights) == ["positive", "neutral", "positive"]

    def test_sensation_needs_five_matches(self, generator, make_entry):
        entries = (
            [make_entry(physical_sensations="relaxed", y=0.9) for _ in range(4)]
            + [make_entry(y=0.5) for _ in range(6)]
        )
        assert "Body Wisdom" not in [i.title for i in generator.generate_baseline_insights(entries)]

    def test_capped_at_three(self, generator, make_entry):
        entries = (
            [make_entry(physical_sensations="relaxed and calm", y=0.9) for _ in range(5)]
            + [make_entry(physical_sensations="tired", y=0.2) for _ in range(5)]
        )
        insights = generator.generate_baseline_insights(entries)
        assert len(insights) == 3
        assert not any('"calm"' in i.description for i in insights)
