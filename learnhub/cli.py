# learnhub/cli.py
"""
Operator commands.

    learnhub [-v] seed [--root DIR] [--full-clear] [--prune]
    learnhub status
    learnhub init-db

stdout carries the report; stderr carries log lines (warnings, errors).
Exit codes: 0 ok, 1 content/store error, 2 configuration error, 130 interrupted.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from learnhub.database import init_db, make_engine, make_session_maker
from learnhub.services.catalog import content_status
from learnhub.services.errors import STORE_FAILURES, ConfigError, SeedError, StoreError
from learnhub.services.seed import run_seed
from learnhub.settings.config import require_database_url

logger = logging.getLogger("learnhub")

DEFAULT_CONTENT_ROOT = Path("content")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    # SQL echo is noisy even at DEBUG
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


async def _cmd_seed(args: argparse.Namespace, url: str) -> int:
    engine = make_engine(url)
    try:
        report = await run_seed(
            make_session_maker(engine),
            args.root,
            full_clear=args.full_clear,
            prune=args.prune,
        )
    finally:
        await engine.dispose()
    print(report.render())
    return 0


async def _cmd_status(args: argparse.Namespace, url: str) -> int:
    engine = make_engine(url)
    try:
        async with make_session_maker(engine)() as db:
            status = await content_status(db)
    except STORE_FAILURES as exc:
        raise StoreError("read content status", cause=exc) from exc
    finally:
        await engine.dispose()

    current = None
    for t in status.topics:
        if t.category_slug != current:
            current = t.category_slug
            print(f"\n{current}:")
        mark = "ok " if t.lesson_count else "-- "
        print(f"  {mark}{t.topic_name} ({t.topic_slug}): {t.lesson_count} lesson(s)")
    print(f"\nTotal topics: {len(status.topics)}")
    print(f"Total lessons: {status.total_lessons}")
    if status.empty_topics:
        print(f"Topics without lessons: {', '.join(status.empty_topics)}")
    return 0


async def _cmd_init_db(args: argparse.Namespace, url: str) -> int:
    engine = make_engine(url)
    try:
        await init_db(engine)
    except STORE_FAILURES as exc:
        raise StoreError("create schema", cause=exc) from exc
    finally:
        await engine.dispose()
    print("Schema created")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="learnhub", description="LearnHub catalog tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    seed = sub.add_parser("seed", help="load the authored content tree into the catalog")
    seed.add_argument("--root", type=Path, default=DEFAULT_CONTENT_ROOT, help="content root (default: ./content)")
    seed.add_argument("--full-clear", action="store_true", help="delete all categories and content first")
    seed.add_argument("--prune", action="store_true", help="delete topics no directory declares anymore")
    seed.set_defaults(handler=_cmd_seed)

    status = sub.add_parser("status", help="lesson counts per topic")
    status.set_defaults(handler=_cmd_status)

    init = sub.add_parser("init-db", help="create tables from the models (dev only; use alembic in prod)")
    init.set_defaults(handler=_cmd_init_db)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        url = require_database_url()
        return asyncio.run(args.handler(args, url))
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        return exc.exit_code
    except SeedError as exc:
        if args.command == "seed":
            logger.error("Seed failed, nothing was committed: %s", exc)
        else:
            logger.error("%s failed: %s", args.command, exc)
        return exc.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted; transaction rolled back")
        return 130


if __name__ == "__main__":
    sys.exit(main())
