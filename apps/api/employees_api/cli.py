"""
Command line entry point.

Usage:
    employees-api              # serve on HOST:PORT
    employees-api --reset      # delete the database file and exit
"""

import argparse
from typing import Optional, Sequence

import uvicorn

from employees_api.core.config import get_settings
from employees_api.core.logger import configure_logging
from employees_api.db.init_db import reset_db


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="employees-api", description="Employees CRUD service")
    parser.add_argument("--reset", action="store_true", help="remove the database file and exit")
    parser.add_argument("--host", default=None, help="bind address (default: HOST setting)")
    parser.add_argument("--port", type=int, default=None, help="port (default: PORT setting)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.reset:
        reset_db(settings.db_file)
        return 0

    from employees_api.main import create_app

    uvicorn.run(
        create_app(settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
