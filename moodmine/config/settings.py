"""Application-wide configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Data directory holding mood log exports (CSV / JSON)
DATA_DIR: Path = Path(
    os.getenv("MOODMINE_DATA_DIR", str(Path(__file__).resolve().parent.parent.parent / "data"))
)

# File names inside DATA_DIR
ENTRIES_CSV_FILE: str = os.getenv("MOODMINE_ENTRIES_CSV", "mood_entries.csv")
ENTRIES_JSON_FILE: str = os.getenv("MOODMINE_ENTRIES_JSON", "mood_entries.json")

# Source coordinate scale (100 for 0..100 exports, 1 for already-normalized)
SOURCE_COORDINATE_SCALE: float = float(os.getenv("MOODMINE_SOURCE_SCALE", "1"))

# ── Pattern Mining ───────────────────────────────────────────────────────

MIN_OCCURRENCES: int = int(os.getenv("MOODMINE_MIN_OCCURRENCES", "3"))
MIN_ENTRIES: int = int(os.getenv("MOODMINE_MIN_ENTRIES", "10"))
MIN_ENTRIES_SELF_TALK: int = int(os.getenv("MOODMINE_MIN_ENTRIES_SELF_TALK", "20"))
MAX_BASELINE_INSIGHTS: int = int(os.getenv("MOODMINE_MAX_BASELINE_INSIGHTS", "3"))

# ── Sentiment Weighting ──────────────────────────────────────────────────

FOCUS_WEIGHT: float = float(os.getenv("MOODMINE_FOCUS_WEIGHT", "0.2"))
SELF_TALK_WEIGHT: float = float(os.getenv("MOODMINE_SELF_TALK_WEIGHT", "0.5"))
PHYSICAL_WEIGHT: float = float(os.getenv("MOODMINE_PHYSICAL_WEIGHT", "0.3"))
NOTES_BLEND: float = float(os.getenv("MOODMINE_NOTES_BLEND", "0.1"))

# ── Trend ────────────────────────────────────────────────────────────────

TREND_SLOPE_THRESHOLD: float = float(os.getenv("MOODMINE_TREND_SLOPE_THRESHOLD", "0.1"))

# ── Logging ──────────────────────────────────────────────────────────────

LOG_LEVEL: str = os.getenv("MOODMINE_LOG_LEVEL", "INFO")
