"""
Loaders for mood log exports.

This is the integration boundary: rows are validated and rescaled here,
and anything malformed is rejected before it reaches the engine, which
trusts its input.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from moodmine.config.settings import (
    DATA_DIR,
    ENTRIES_CSV_FILE,
    ENTRIES_JSON_FILE,
    SOURCE_COORDINATE_SCALE,
)
from moodmine.models.entry import MoodEntry

logger = logging.getLogger(__name__)


class EntryValidationError(ValueError):
    """A mood log row that cannot be turned into a MoodEntry."""


def entry_from_record(
    record: dict[str, Any],
    scale: float = SOURCE_COORDINATE_SCALE,
    invert_y: bool = False,
) -> MoodEntry:
    """Build a validated MoodEntry from a raw row.

    ``scale`` divides both coordinates (100 for 0..100 exports).
    ``invert_y`` flips happiness for sources that store screen
    coordinates (top of the pad = happiest = 0).
    """
    entry_id = str(record.get("id", "") or "").strip()
    if not entry_id:
        raise EntryValidationError("missing id")

    ts = _parse_iso(record.get("timestamp"))
    if ts is None:
        raise EntryValidationError(f"{entry_id}: bad timestamp {record.get('timestamp')!r}")

    x = _coordinate(record.get("x"), scale, entry_id, "x")
    y = _coordinate(record.get("y"), scale, entry_id, "y")
    if invert_y:
        y = 1.0 - y

    return MoodEntry(
        id=entry_id,
        timestamp=ts,
        x=x,
        y=y,
        focus=_text(record.get("focus")),
        self_talk=_text(record.get("self_talk")),
        physical_sensations=_text(record.get("physical_sensations")),
        notes=_text(record.get("notes")) or None,
        title=_text(record.get("title")) or None,
    )


def entries_from_records(
    records: list[dict[str, Any]],
    scale: float = SOURCE_COORDINATE_SCALE,
    invert_y: bool = False,
    strict: bool = True,
) -> list[MoodEntry]:
    """Convert rows; with ``strict=False`` bad rows are logged and skipped."""
    entries: list[MoodEntry] = []
    for i, record in enumerate(records):
        try:
            entries.append(entry_from_record(record, scale=scale, invert_y=invert_y))
        except EntryValidationError as exc:
            if strict:
                raise
            logger.warning("Skipping row %d: %s", i, exc)
    logger.info("Loaded %d of %d mood entries", len(entries), len(records))
    return entries


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def parse_entries_csv(
    path: Path | None = None,
    scale: float = SOURCE_COORDINATE_SCALE,
    invert_y: bool = False,
    strict: bool = True,
) -> list[MoodEntry]:
    """Parse a CSV export with columns id, timestamp, x, y, focus,
    self_talk, physical_sensations, notes, title."""
    path = path or DATA_DIR / ENTRIES_CSV_FILE
    df = pd.read_csv(path, dtype=str).fillna("")
    records = [row.to_dict() for _, row in df.iterrows()]
    return entries_from_records(records, scale=scale, invert_y=invert_y, strict=strict)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def parse_entries_json(
    path: Path | None = None,
    scale: float = SOURCE_COORDINATE_SCALE,
    invert_y: bool = False,
    strict: bool = True,
) -> list[MoodEntry]:
    """Parse a JSON export: a list of row objects, or {"entries": [...]}."""
    path = path or DATA_DIR / ENTRIES_JSON_FILE
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    records = raw.get("entries", []) if isinstance(raw, dict) else raw
    return entries_from_records(records, scale=scale, invert_y=invert_y, strict=strict)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_iso(s: Any) -> datetime | None:
    if isinstance(s, datetime):
        return s
    if not s:
        return None
    try:
        return datetime.fromisoformat(str(s).replace("Z", "+00:00"))
    except (ValueError, TypeError):
        return None


def _coordinate(value: Any, scale: float, entry_id: str, name: str) -> float:
    try:
        coord = float(value) / scale
    except (ValueError, TypeError):
        raise EntryValidationError(f"{entry_id}: {name} is not a number ({value!r})")
    if not 0.0 <= coord <= 1.0:
        raise EntryValidationError(f"{entry_id}: {name}={coord} outside [0, 1]")
    return coord


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
