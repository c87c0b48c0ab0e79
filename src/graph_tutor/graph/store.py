from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from .models import Word


class GraphStore(Protocol):
    """Abstraction for the backing graph database."""

    def ensure_schema(self) -> None: ...

    def find(self, label: str, key: Any) -> dict[str, Any] | None: ...

    def create_node(self, label: str, properties: dict[str, Any]) -> dict[str, Any]: ...

    def run_transaction(
        self, cypher: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]: ...

    def query(self, cypher: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]: ...

    def import_words(self, words: Iterable[Word]) -> int: ...

    def close(self) -> None: ...
