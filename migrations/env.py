"""Alembic environment for the Share-a-Byte schema.

The target database comes from ``ALEMBIC_URL`` when set, otherwise from the
application settings, so migrations and the running API share one source of
truth. ``alembic.ini`` puts ``src/`` on the import path.
"""
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import Connection

from share_a_byte.core.settings import settings
from share_a_byte.db.session import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    return (
        os.getenv("ALEMBIC_URL")
        or config.get_main_option("sqlalchemy.url")
        or settings.effective_database_url
    )


def _configure(**kwargs: object) -> None:
    # SQLite can only alter tables by copying them.
    url = str(kwargs.get("url") or "")
    connection = kwargs.get("connection")
    is_sqlite = url.startswith("sqlite") or (
        isinstance(connection, Connection) and connection.dialect.name == "sqlite"
    )
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=is_sqlite,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations against a live connection."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
