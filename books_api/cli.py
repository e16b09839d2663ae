"""
CLI entry point for the books service.

Usage:
    # Create the book table in the configured database
    python -m books_api.cli init-db

    # Serve the API
    python -m books_api.cli serve --port 8000
"""

import argparse
import logging

from books_api.core.config import settings
from books_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the schema in the configured database."""
    from books_api.infrastructure.database import create_db_engine, init_schema

    engine = create_db_engine(settings.database_url)
    try:
        init_schema(engine)
    finally:
        engine.dispose()
    logger.info("Initialised schema at %s", engine.url.render_as_string())


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("books_api.main:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Books API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on source changes (development)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    args.func(args)


if __name__ == "__main__":
    main()
