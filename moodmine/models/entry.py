"""Mood entry model consumed by the pattern engine.

Coordinates are expected on the 0..1 scale. Rescaling from 0..100 sources
happens at the loading boundary (see ``moodmine.data_pipeline.parsers``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


class FieldKind:
    FOCUS = "focus"
    SELF_TALK = "self_talk"
    PHYSICAL = "physical"


# FieldKind -> MoodEntry attribute holding that text
FIELD_ATTRIBUTES: dict[str, str] = {
    FieldKind.FOCUS: "focus",
    FieldKind.SELF_TALK: "self_talk",
    FieldKind.PHYSICAL: "physical_sensations",
}

FIELD_ORDER: tuple[str, ...] = (FieldKind.FOCUS, FieldKind.SELF_TALK, FieldKind.PHYSICAL)


@dataclass
class MoodEntry:
    id: str
    timestamp: datetime
    x: float                        # motivation, 0..1
    y: float                        # happiness, 0..1
    focus: str = ""
    self_talk: str = ""
    physical_sensations: str = ""
    notes: Optional[str] = None
    title: Optional[str] = None

    @property
    def motivation(self) -> float:
        return self.x

    @property
    def happiness(self) -> float:
        return self.y

    def text_for(self, field_kind: str) -> str:
        """Return the free text stored for a FieldKind ('' when missing)."""
        return getattr(self, FIELD_ATTRIBUTES[field_kind]) or ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "x": self.x,
            "y": self.y,
            "focus": self.focus,
            "self_talk": self.self_talk,
            "physical_sensations": self.physical_sensations,
            "notes": self.notes,
            "title": self.title,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MoodEntry:
        data = dict(data)  # copy
        ts = data.get("timestamp")
        if isinstance(ts, str):
            data["timestamp"] = datetime.fromisoformat(ts.replace("Z", "+00:00"))
        for coord in ("x", "y"):
            if coord in data:
                data[coord] = float(data[coord])
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
