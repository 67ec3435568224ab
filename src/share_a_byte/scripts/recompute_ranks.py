"""Recompute leaderboard ranks from current share scores.

Typical usage:
  share-a-byte-ranks
  share-a-byte-ranks --url sqlite:///./share_a_byte.db
"""

from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from share_a_byte.core.settings import settings
from share_a_byte.services.share_scores import recompute_ranks

logger = logging.getLogger("share_a_byte.scripts.recompute_ranks")


def run(url: str) -> int:
    """Rank every share score in the database at ``url``."""
    engine = create_engine(url)
    session_factory = sessionmaker(bind=engine, autoflush=False)
    try:
        with session_factory() as db:
            return recompute_ranks(db)
    finally:
        engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recompute share score ranks")
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to effective settings URL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    try:
        count = run(args.url or settings.effective_database_url)
    except SQLAlchemyError as exc:
        print(f"[ranks] ERROR: {exc}", file=sys.stderr)
        return 1
    print(f"[ranks] ranked {count} share scores")
    return 0


if __name__ == "__main__":
    sys.exit(main())
