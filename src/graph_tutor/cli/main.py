from __future__ import annotations

import argparse
import json
import logging

from graph_tutor.errors import ValidationError
from graph_tutor.settings import settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _store():
    from graph_tutor.graph.neo4j_store import build_store

    return build_store(
        uri=settings.neo4j_uri,
        user=settings.neo4j_user,
        password=settings.neo4j_password,
        database=settings.neo4j_database,
        max_transaction_retry_time=settings.neo4j_max_transaction_retry_time,
        batch_size=settings.import_batch_size,
    )


def cmd_version() -> int:
    from graph_tutor import __version__

    print(__version__)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    _configure_logging()
    from graph_tutor.service.server import serve

    serve(settings, host=args.host, port=args.port)
    return 0


def cmd_ensure_schema(args: argparse.Namespace) -> int:
    _configure_logging()
    store = _store()
    try:
        store.ensure_schema()
    finally:
        store.close()
    logger.info("Schema constraints in place")
    return 0


def cmd_import_words(args: argparse.Namespace) -> int:
    _configure_logging()
    from graph_tutor.graph.words import load_words

    try:
        words = load_words(args.path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Cannot read words from %s: %s", args.path, e)
        return 1
    if not words:
        logger.warning("No words found in %s", args.path)
        return 1

    store = _store()
    try:
        if not args.skip_schema:
            store.ensure_schema()
        n = store.import_words(words)
    finally:
        store.close()
    print(f"imported {n} words")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="graph-tutor")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    srv = sub.add_parser("serve", help="Run the HTTP service")
    srv.add_argument("--host", default=None)
    srv.add_argument("--port", type=int, default=None)
    srv.set_defaults(func=cmd_serve)

    sub.add_parser("ensure-schema", help="Create uniqueness constraints").set_defaults(
        func=cmd_ensure_schema
    )

    imp = sub.add_parser("import-words", help="Load Word nodes from a JSON array or JSON lines file")
    imp.add_argument("path")
    imp.add_argument("--skip-schema", action="store_true", help="Do not create constraints first")
    imp.set_defaults(func=cmd_import_words)

    return p


def app(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
