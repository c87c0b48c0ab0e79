"""
Pytest configuration and fixtures.

InMemoryGraphStore stands in for Neo4j. It implements the GraphStore protocol
and emulates the fixed Cypher scripts in graph_tutor.graph.queries with the
same semantics: MATCH-before-CREATE, MERGE on the VocabError key and MERGE on
the HAD_VOCAB_ERROR edge.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import Any

import pytest
from fastapi.testclient import TestClient

from graph_tutor.graph import queries
from graph_tutor.graph.models import NODE_KEYS, Word
from graph_tutor.service.app import create_app
from graph_tutor.tutor import SessionStarter


class InMemoryGraphStore:
    def __init__(self, words: Iterable[Word] = ()):
        self.nodes: dict[str, dict[Any, dict[str, Any]]] = {label: {} for label in NODE_KEYS}
        self.responses: list[dict[str, Any]] = []
        # (sessionId, response index)
        self.gave_response: list[tuple[str, int]] = []
        # (exercise id, word text)
        self.targets: list[tuple[str, str]] = []
        # (sessionId, vocab error word)
        self.had_vocab_error: list[tuple[str, str]] = []
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self.closed = False
        for w in words:
            self.nodes["Word"][w.text] = w.to_props()

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    # GraphStore protocol

    def ensure_schema(self) -> None:
        self._record("ensure_schema")

    def find(self, label: str, key: Any) -> dict[str, Any] | None:
        self._record("find")
        if label not in NODE_KEYS:
            raise ValueError(f"unsupported node label: {label!r}")
        node = self.nodes[label].get(key)
        return dict(node) if node is not None else None

    def create_node(self, label: str, properties: dict[str, Any]) -> dict[str, Any]:
        self._record("create_node")
        key = properties[NODE_KEYS[label]]
        # Neo4j drops null-valued properties
        node = {k: v for k, v in properties.items() if v is not None}
        self.nodes[label][key] = node
        return dict(node)

    def run_transaction(self, cypher: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        self._record("run_transaction")
        params = params or {}
        if cypher == queries.LOG_RESPONSE:
            return self._log_response(params)
        if cypher == queries.IMPORT_WORDS:
            for row in params["rows"]:
                self.nodes["Word"][row["text"]] = dict(row)
            return [{"n": len(params["rows"])}]
        raise AssertionError(f"unexpected write script: {cypher}")

    def query(self, cypher: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        self._record("query")
        params = params or {}
        if cypher == queries.LIST_WORDS:
            return [
                {k: w.get(k) for k in ("text", "gender", "pos", "difficulty", "frequency")}
                for _, w in sorted(self.nodes["Word"].items())
            ]
        if cypher == queries.SESSION_VOCAB_ERRORS:
            sid = params["sessionId"]
            if sid not in self.nodes["Session"]:
                return []
            words = sorted(w for s, w in self.had_vocab_error if s == sid)
            errors = [{"word": w, "count": self.nodes["VocabError"][w].get("count")} for w in words]
            return [{"sessionId": sid, "errors": errors}]
        raise AssertionError(f"unexpected read query: {cypher}")

    def import_words(self, words: Iterable[Word]) -> int:
        rows = [w.to_props() for w in words]
        return self.run_transaction(queries.IMPORT_WORDS, {"rows": rows})[0]["n"]

    def close(self) -> None:
        self.closed = True

    def _log_response(self, p: dict[str, Any]) -> list[dict[str, Any]]:
        session = self.nodes["Session"].get(p["sessionId"])
        word = self.nodes["Word"].get(p["wordText"])
        if session is None or word is None:
            return []

        exercise_id = str(uuid.uuid4())
        self.nodes["Exercise"][exercise_id] = {
            "id": exercise_id,
            "type": p["exerciseType"],
            "prompt": p["prompt"],
        }
        self.responses.append({"answer": p["userAnswer"], "correct": p["correct"]})
        self.gave_response.append((session["sessionId"], len(self.responses) - 1))
        self.targets.append((exercise_id, word["text"]))

        if not p["correct"]:
            err = self.nodes["VocabError"].get(word["text"])
            if err is None:
                self.nodes["VocabError"][word["text"]] = {"word": word["text"], "count": 1}
            else:
                err["count"] = (err.get("count") or 0) + 1
            edge = (session["sessionId"], word["text"])
            if edge not in self.had_vocab_error:
                self.had_vocab_error.append(edge)

        return [{"correct": p["correct"], "word": word["text"], "sessionId": session["sessionId"]}]


SAMPLE_WORDS = [
    Word(text="der Hund", gender="m", pos="noun", difficulty=1, frequency=120),
    Word(text="die Katze", gender="f", pos="noun", difficulty=1, frequency=95),
    Word(text="laufen", gender=None, pos="verb", difficulty=2, frequency=80),
]


@pytest.fixture
def store() -> InMemoryGraphStore:
    return InMemoryGraphStore(words=SAMPLE_WORDS)


@pytest.fixture
def session_id(store: InMemoryGraphStore) -> str:
    return SessionStarter(store).start()


@pytest.fixture
def client(store: InMemoryGraphStore) -> TestClient:
    return TestClient(create_app(store))
