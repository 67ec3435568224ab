# mypy: ignore-errors
# tests/test_migrations.py
"""Tests for the Alembic migration environment."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from share_a_byte.db.session import Base

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"


def test_upgrade_head_creates_every_table(tmp_path, monkeypatch) -> None:
    """Upgrading an empty database yields the tables the models declare."""
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("ALEMBIC_URL", url)
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))

    command.upgrade(config, "head")

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert set(Base.metadata.tables) <= tables
    assert "alembic_version" in tables
