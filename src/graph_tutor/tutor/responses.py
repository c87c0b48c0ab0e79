from __future__ import annotations

import logging
from dataclasses import dataclass

from graph_tutor.errors import NotFoundError, ValidationError
from graph_tutor.graph import queries
from graph_tutor.graph.store import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_EXERCISE_TYPE = "unknown"


@dataclass(frozen=True, slots=True)
class ResponseAttempt:
    """One learner attempt as submitted by the caller."""

    session_id: str | None
    word_text: str | None
    prompt: str | None
    correct: bool | None
    user_answer: str | None = ""
    exercise_type: str | None = None


@dataclass(frozen=True, slots=True)
class LoggedResponse:
    session_id: str
    word: str
    correct: bool


def validate_attempt(attempt: ResponseAttempt) -> None:
    """Presence and type checks. Never touches the store."""

    if not attempt.session_id or not attempt.word_text or not attempt.prompt:
        raise ValidationError("missing required fields")
    # bool only: 0/1 and "true" are rejected
    if not isinstance(attempt.correct, bool):
        raise ValidationError("missing required fields")


class ResponseLogger:
    """Records attempts and keeps the per-word miss counter.

    The whole write is a single Cypher script in one transaction: the
    Exercise, the Response, both edges and (for a miss) the VocabError
    upsert commit together or not at all.
    """

    def __init__(self, store: GraphStore):
        self.store = store

    def log(self, attempt: ResponseAttempt) -> LoggedResponse:
        validate_attempt(attempt)

        params = {
            "sessionId": attempt.session_id,
            "wordText": attempt.word_text,
            "exerciseType": attempt.exercise_type or DEFAULT_EXERCISE_TYPE,
            "prompt": attempt.prompt,
            "userAnswer": attempt.user_answer or "",
            "correct": attempt.correct,
        }
        rows = self.store.run_transaction(queries.LOG_RESPONSE, params)
        if not rows:
            # Nothing was written; report which reference was missing.
            raise self._missing_reference(attempt)

        row = rows[0]
        logger.debug(
            "Logged response session=%s word=%s correct=%s",
            row["sessionId"],
            row["word"],
            row["correct"],
        )
        return LoggedResponse(session_id=row["sessionId"], word=row["word"], correct=row["correct"])

    def _missing_reference(self, attempt: ResponseAttempt) -> NotFoundError:
        if self.store.find("Session", attempt.session_id) is None:
            return NotFoundError(f"session not found: {attempt.session_id}")
        if self.store.find("Word", attempt.word_text) is None:
            return NotFoundError(f"word not found: {attempt.word_text}")
        # Both exist now, so one was removed or created concurrently.
        return NotFoundError("session or word not found")
