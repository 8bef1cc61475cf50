"""Build a synthetic mood history and print the full insight report.

Run: python -m moodmine.scripts.demo_report
"""

import json
import logging
import random
from datetime import datetime, timedelta, timezone

from moodmine.config.engine_config import EngineConfig
from moodmine.config.settings import LOG_LEVEL
from moodmine.engine.insight_engine import InsightEngine
from moodmine.models.entry import MoodEntry

# (focus, self_talk, physical, happiness, motivation)
SCENARIOS = [
    ("Morning run", "I feel strong and capable", "energized, light", 0.85, 0.8),
    ("Work deadline", "I can't keep up, this is impossible", "tense shoulders", 0.25, 0.55),
    ("Family dinner", "I love these people", "relaxed", 0.8, 0.45),
    ("Email backlog", "I should be faster at this", "tired", 0.35, 0.3),
    ("Reading", "This is nice", "calm", 0.7, 0.4),
]


def build_history(days: int = 28, seed: int = 7) -> list[MoodEntry]:
    rng = random.Random(seed)
    start = datetime(2026, 1, 4, 8, 0, tzinfo=timezone.utc)
    entries = []
    for day in range(days):
        for slot in range(2):
            focus, self_talk, physical, happy, motivated = rng.choice(SCENARIOS)
            # Gentle upward drift over the month
            drift = day * 0.004
            entries.append(MoodEntry(
                id=f"demo-{day:02d}-{slot}",
                timestamp=start + timedelta(days=day, hours=slot * 10 + rng.randint(0, 2)),
                x=min(1.0, max(0.0, motivated + rng.uniform(-0.05, 0.05))),
                y=min(1.0, max(0.0, happy + drift + rng.uniform(-0.05, 0.05))),
                focus=focus,
                self_talk=self_talk,
                physical_sensations=physical,
                notes="Good day overall" if happy > 0.6 else None,
            ))
    return entries


def main():
    entries = build_history()
    engine = InsightEngine(config=EngineConfig.from_settings())
    report = engine.build_report(entries, now=entries[-1].timestamp)
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    main()
