from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# Node label -> natural key property. Labels cannot be query parameters, so
# anything not listed here is rejected by the store.
NODE_KEYS: dict[str, str] = {
    "Word": "text",
    "Session": "sessionId",
    "Exercise": "id",
    "VocabError": "word",
}


@dataclass(frozen=True, slots=True)
class Word:
    """Reference vocabulary; read and linked, never created by the logger."""

    text: str
    gender: str | None = None
    pos: str | None = None
    difficulty: int | float | None = None
    frequency: int | float | None = None

    def to_props(self) -> dict:
        return {
            "text": self.text,
            "gender": self.gender,
            "pos": self.pos,
            "difficulty": self.difficulty,
            "frequency": self.frequency,
        }


@dataclass(frozen=True, slots=True)
class Session:
    session_id: str
    created: datetime
    score: int = 0
    level_estimate: float | None = None
    confidence: float | None = None

    def to_props(self) -> dict:
        # Property names as stored on the node.
        return {
            "sessionId": self.session_id,
            "score": self.score,
            "level_estimate": self.level_estimate,
            "confidence": self.confidence,
            "created": self.created,
        }


@dataclass(frozen=True, slots=True)
class VocabError:
    """Cumulative miss counter for one word."""

    word: str
    count: int
