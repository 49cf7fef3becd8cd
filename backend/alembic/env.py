"""Alembic environment — async migration runner for the catalog schema.

Design Decisions:
    - DATABASE_URL (when set) goes through Settings, so the postgresql:// →
      postgresql+asyncpg:// rewrite lives in one place (config.py)
    - Without DATABASE_URL the alembic.ini url is used (local docker-compose)
    - Logging is only configured when run from an ini file, so programmatic
      upgrades (tests, startup scripts) keep the app's own handlers
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

import app.models  # noqa: F401  (registers genres/books on Base.metadata)
from app.config import Settings
from app.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _get_database_url() -> str:
    if os.environ.get("DATABASE_URL"):
        return Settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _configure_and_run(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


async def _run_async_migrations() -> None:
    connectable = async_engine_from_config(
        {"sqlalchemy.url": _get_database_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with connectable.connect() as connection:
        await connection.run_sync(
            lambda sync_conn: _configure_and_run(connection=sync_conn),
        )
    await connectable.dispose()


def run_migrations_offline() -> None:
    """Emit SQL without a connection (alembic upgrade --sql)."""
    _configure_and_run(
        url=_get_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(_run_async_migrations())
