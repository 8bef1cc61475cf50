"""Coaching suggestions derived from sentiment scores and self-talk text.

Four rules, evaluated in order. Each fires on its own predicate, so an
entry can receive anywhere from zero to four suggestions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from moodmine.config.engine_config import EngineConfig
from moodmine.models.results import CoachingSuggestion, SuggestionKind

# Self-talk categories that make a negative score worth reframing
REFRAME_PATTERNS: dict[str, re.Pattern] = {
    "absolute": re.compile(r"never|always|impossible|can't|won't", re.IGNORECASE),
    "prescriptive": re.compile(r"should|must|ought to", re.IGNORECASE),
    "harsh": re.compile(r"failure|failed|failing|stupid|worthless", re.IGNORECASE),
}


def matched_reframe_categories(text: str | None) -> list[str]:
    """Names of the REFRAME_PATTERNS categories found in ``text``."""
    if not text:
        return []
    return [name for name, pattern in REFRAME_PATTERNS.items() if pattern.search(text)]


# predicate(self_talk_sentiment, self_talk_text, overall_sentiment, config)
Predicate = Callable[[float, str, float, EngineConfig], bool]


@dataclass(frozen=True)
class CoachingRule:
    kind: str
    title: str
    message: str
    tips: tuple[str, ...]
    based_on: str
    predicate: Predicate

    def applies(self, self_talk: float, text: str, overall: float, config: EngineConfig) -> bool:
        return self.predicate(self_talk, text, overall, config)

    def suggestion(self) -> CoachingSuggestion:
        return CoachingSuggestion(
            kind=self.kind,
            title=self.title,
            message=self.message,
            tips=list(self.tips),
            based_on=self.based_on,
        )


def _critical_self_talk(self_talk: float, text: str, overall: float, cfg: EngineConfig) -> bool:
    return self_talk < cfg.reframe_threshold and bool(matched_reframe_categories(text))


def _strong_self_talk(self_talk: float, text: str, overall: float, cfg: EngineConfig) -> bool:
    return self_talk > cfg.celebrate_threshold


def _dissonance(self_talk: float, text: str, overall: float, cfg: EngineConfig) -> bool:
    return overall > cfg.dissonance_overall_threshold and self_talk < cfg.reframe_threshold


def _neutral_space(self_talk: float, text: str, overall: float, cfg: EngineConfig) -> bool:
    return abs(overall) < cfg.neutral_band and abs(self_talk) < cfg.neutral_band


COACHING_RULES: tuple[CoachingRule, ...] = (
    CoachingRule(
        kind=SuggestionKind.REFRAME,
        title="Notice Your Self-Talk",
        message=(
            "Your inner voice seems critical right now. Reframing negative "
            "thoughts can shift your emotional experience."
        ),
        tips=(
            'Replace "I can\'t" with "I haven\'t yet" or "I\'m learning to"',
            'Change "I should" to "I could" or "I choose to"',
            'Ask yourself: "Would I talk to a friend this way?"',
            "What would a supportive friend say to you right now?",
        ),
        based_on="sentiment",
        predicate=_critical_self_talk,
    ),
    CoachingRule(
        kind=SuggestionKind.CELEBRATE,
        title="Your Mindset is Strong",
        message=(
            "Your self-talk is constructive and empowering. This positive "
            "mindset is a valuable resource."
        ),
        tips=(
            "Remember this feeling - you can return to it later",
            "Notice what led to this positive mindset",
            "Consider journaling to capture these thoughts",
            "Celebrate this moment of self-compassion",
        ),
        based_on="sentiment",
        predicate=_strong_self_talk,
    ),
    CoachingRule(
        kind=SuggestionKind.EXPLORE,
        title="Interesting Contrast",
        message=(
            "Your thoughts are more negative than your overall situation. "
            "This gap might be worth exploring."
        ),
        tips=(
            "What evidence supports your negative thought?",
            "What evidence contradicts it?",
            "Is this thought based on facts or feelings?",
            "What would happen if you let go of this thought?",
        ),
        based_on="combination",
        predicate=_dissonance,
    ),
    CoachingRule(
        kind=SuggestionKind.PRACTICE,
        title="Ground Yourself",
        message=(
            "You seem to be in a neutral space. This is a great time for "
            "grounding practices."
        ),
        tips=(
            "Take 3 deep breaths, focusing on the exhale",
            "Notice 5 things you can see, 4 you can touch, 3 you can hear",
            "Check in with your body - where do you feel tension?",
            "Set an intention for how you want to feel next",
        ),
        based_on="sentiment",
        predicate=_neutral_space,
    ),
)


def get_coaching_suggestions(
    self_talk_sentiment: float,
    self_talk_text: str | None,
    overall_sentiment: float,
    config: Optional[EngineConfig] = None,
    rules: tuple[CoachingRule, ...] = COACHING_RULES,
) -> list[CoachingSuggestion]:
    """Evaluate every rule in order and collect the ones that fire."""
    config = config or EngineConfig()
    text = self_talk_text or ""
    return [
        rule.suggestion()
        for rule in rules
        if rule.applies(self_talk_sentiment, text, overall_sentiment, config)
    ]
