from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime

from graph_tutor.errors import NotFoundError
from graph_tutor.graph import queries
from graph_tutor.graph.models import Session, VocabError
from graph_tutor.graph.store import GraphStore

logger = logging.getLogger(__name__)


class SessionStarter:
    def __init__(self, store: GraphStore):
        self.store = store

    def start(self) -> str:
        """Create a Session node and return its generated id."""

        session = Session(session_id=str(uuid.uuid4()), created=datetime.now(UTC))
        node = self.store.create_node("Session", session.to_props())
        logger.info("Started session %s", node["sessionId"])
        return node["sessionId"]

    def vocab_errors(self, session_id: str) -> list[VocabError]:
        """Words missed in a session, with each word's cumulative count."""

        rows = self.store.query(queries.SESSION_VOCAB_ERRORS, {"sessionId": session_id})
        if not rows:
            raise NotFoundError(f"session not found: {session_id}")
        return [VocabError(word=e["word"], count=int(e["count"] or 0)) for e in rows[0]["errors"]]
