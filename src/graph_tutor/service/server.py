from __future__ import annotations

import logging

import uvicorn

from graph_tutor.graph.neo4j_store import build_store
from graph_tutor.settings import TutorSettings, settings

from .app import create_app

logger = logging.getLogger(__name__)


def serve(
    cfg: TutorSettings = settings, *, host: str | None = None, port: int | None = None
) -> None:
    """Run the HTTP service; the store lives exactly as long as the server."""

    store = build_store(
        uri=cfg.neo4j_uri,
        user=cfg.neo4j_user,
        password=cfg.neo4j_password,
        database=cfg.neo4j_database,
        max_transaction_retry_time=cfg.neo4j_max_transaction_retry_time,
        batch_size=cfg.import_batch_size,
    )
    app = create_app(store)

    config = uvicorn.Config(
        app,
        host=host or cfg.bind_host,
        port=port or cfg.bind_port,
        log_level=(cfg.log_level or "info").lower(),
        loop="uvloop",
        http="httptools",
    )
    server = uvicorn.Server(config)

    try:
        store.verify_connectivity()
        logger.info("Connected to Neo4j at %s", cfg.neo4j_uri)
        server.run()
    finally:
        store.close()
        logger.info("Neo4j driver closed")


def main() -> None:
    logging.basicConfig(level=(settings.log_level or "INFO").upper())
    serve()


if __name__ == "__main__":
    main()
