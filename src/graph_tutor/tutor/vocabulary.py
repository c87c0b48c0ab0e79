from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from graph_tutor.graph import queries
from graph_tutor.graph.store import GraphStore

WORD_FIELDS = ("text", "gender", "pos", "difficulty", "frequency")


@dataclass(slots=True)
class VocabularyReader:
    store: GraphStore

    def list_words(self) -> list[dict[str, Any]]:
        rows = self.store.query(queries.LIST_WORDS)
        return [{k: r.get(k) for k in WORD_FIELDS} for r in rows]

    def list_words_indexed(self) -> list[dict[str, Any]]:
        # Positional ids only; recomputed on every read and never stored.
        return [{"id": i, **w} for i, w in enumerate(self.list_words(), start=1)]
