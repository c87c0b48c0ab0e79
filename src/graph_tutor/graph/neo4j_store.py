from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from neo4j import GraphDatabase
from neo4j.exceptions import DriverError, Neo4jError

from graph_tutor.errors import StoreError

from . import queries
from .models import NODE_KEYS, Word
from .words import batched

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Neo4jConfig:
    uri: str
    user: str
    password: str
    database: str = "neo4j"
    # 0 disables the driver's managed-transaction retry
    max_transaction_retry_time: float = 0.0
    # word import
    batch_size: int = 500


def _key_for(label: str) -> str:
    try:
        return NODE_KEYS[label]
    except KeyError:
        raise ValueError(f"unsupported node label: {label!r}") from None


class Neo4jGraphStore:
    """Neo4j-backed graph store.

    Every call opens its own session and closes it on exit, including when the
    query fails. Writes go through managed write transactions, so a failing
    statement rolls back everything the script did.
    """

    def __init__(self, cfg: Neo4jConfig, *, driver=None):
        self.cfg = cfg
        # Driver is thread-safe; sessions are lightweight.
        self._driver = driver or GraphDatabase.driver(
            cfg.uri,
            auth=(cfg.user, cfg.password),
            max_transaction_retry_time=cfg.max_transaction_retry_time,
        )

    def close(self) -> None:
        self._driver.close()

    def verify_connectivity(self) -> None:
        try:
            self._driver.verify_connectivity()
        except (Neo4jError, DriverError) as e:
            raise StoreError(f"graph store unavailable: {e}") from e

    def ensure_schema(self) -> None:
        try:
            with self._driver.session(database=self.cfg.database) as s:
                for q in queries.SCHEMA_STATEMENTS:
                    s.run(q).consume()
        except (Neo4jError, DriverError) as e:
            raise StoreError(f"schema setup failed: {e}") from e

    def find(self, label: str, key: Any) -> dict[str, Any] | None:
        rows = self.query(queries.find_node(label, _key_for(label)), {"key": key})
        if not rows:
            return None
        return rows[0]["node"]

    def create_node(self, label: str, properties: dict[str, Any]) -> dict[str, Any]:
        _key_for(label)
        rows = self.run_transaction(queries.create_node(label), {"props": properties})
        return rows[0]["node"]

    def run_transaction(
        self, cypher: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        try:
            with self._driver.session(database=self.cfg.database) as s:
                return s.execute_write(self._run_tx, cypher, params or {})
        except (Neo4jError, DriverError) as e:
            logger.error("Write transaction failed: %s", e)
            raise StoreError(f"graph store write failed: {e}") from e

    def query(self, cypher: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        try:
            with self._driver.session(database=self.cfg.database) as s:
                return s.execute_read(self._run_tx, cypher, params or {})
        except (Neo4jError, DriverError) as e:
            logger.error("Read query failed: %s", e)
            raise StoreError(f"graph store read failed: {e}") from e

    def import_words(self, words: Iterable[Word]) -> int:
        n = 0
        for batch in batched(words, self.cfg.batch_size):
            rows = self.run_transaction(
                queries.IMPORT_WORDS, {"rows": [w.to_props() for w in batch]}
            )
            n += rows[0]["n"] if rows else 0
        return n

    @staticmethod
    def _run_tx(tx, cypher: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        # Results must be consumed inside the transaction function.
        return [dict(r) for r in tx.run(cypher, params)]


def build_store(
    *,
    uri: str | None,
    user: str | None,
    password: str | None,
    database: str = "neo4j",
    max_transaction_retry_time: float = 0.0,
    batch_size: int = 500,
) -> Neo4jGraphStore:
    if not (uri and user and password):
        raise RuntimeError(
            "Neo4j not configured. Set GRAPH_TUTOR_NEO4J_URI/USER/PASSWORD (or NEO4J_* env vars)."
        )
    return Neo4jGraphStore(
        Neo4jConfig(
            uri=uri,
            user=user,
            password=password,
            database=database,
            max_transaction_retry_time=max_transaction_retry_time,
            batch_size=batch_size,
        )
    )
