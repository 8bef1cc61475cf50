"""Cognitive distortion detection: pure functions over self-talk text.

Rules are data: each record pairs a pattern with its fixed output text.
Every rule is evaluated independently, so one sentence can carry several
distortions at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from moodmine.models.results import DistortionResult


@dataclass(frozen=True)
class DistortionRule:
    distortion: str
    pattern: re.Pattern
    description: str
    reframe: str

    def matches(self, text: str) -> bool:
        return bool(self.pattern.search(text))

    def result(self) -> DistortionResult:
        return DistortionResult(
            distortion=self.distortion,
            description=self.description,
            reframe=self.reframe,
        )


DISTORTION_RULES: tuple[DistortionRule, ...] = (
    DistortionRule(
        distortion="All-or-Nothing Thinking",
        pattern=re.compile(r"always|never|everyone|no one|everything|nothing", re.IGNORECASE),
        description="Seeing things in black and white categories",
        reframe='Try using "sometimes" or "often" instead of absolute terms',
    ),
    DistortionRule(
        distortion="Should Statements",
        pattern=re.compile(r"should|must|ought to|have to", re.IGNORECASE),
        description="Trying to motivate yourself with rigid rules",
        reframe='Replace "should" with "could" or "want to" for more flexibility',
    ),
    DistortionRule(
        distortion="Catastrophizing",
        pattern=re.compile(r"terrible|awful|horrible|worst|disaster", re.IGNORECASE),
        description="Expecting the worst possible outcome",
        reframe='Ask: "What\'s the most likely outcome?" or "How bad would it really be?"',
    ),
    DistortionRule(
        distortion="Labeling",
        # Self-reference followed by a global negative trait; a bare "I am" never matches
        pattern=re.compile(
            r"\b(?:i am|i'm)\b.*\b(?:stupid|worthless|failure|loser|incompetent)\b",
            re.IGNORECASE,
        ),
        description="Assigning global negative traits to yourself",
        reframe="Describe the specific behavior, not yourself as a person",
    ),
)


def detect_cognitive_distortions(
    self_talk_text: str | None,
    rules: tuple[DistortionRule, ...] = DISTORTION_RULES,
) -> list[DistortionResult]:
    """Return every distortion whose rule matches, in rule order."""
    if not self_talk_text or not self_talk_text.strip():
        return []
    return [rule.result() for rule in rules if rule.matches(self_talk_text)]
