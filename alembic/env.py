"""Alembic environment for Brandkit.

The database URL always comes from ``DATABASE_URL`` (via Settings), never
from alembic.ini. Online runs go through asyncpg; offline runs
(``alembic upgrade --sql``) only render SQL. Both report start and end
through ``db_logger``.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from brandkit.core.config import get_settings
from brandkit.core.database import Base, to_async_url
from brandkit.core.logging import db_logger

# Registers every table on Base.metadata
import brandkit.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _target_version() -> str:
    head = context.get_head_revision()
    return str(head) if head else "initial"


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without connecting."""
    _configure(
        url=to_async_url(str(get_settings().database_url)),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations over a short-lived asyncpg engine."""
    settings = get_settings()
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = to_async_url(str(settings.database_url))

    engine = async_engine_from_config(
        section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        connect_args={
            "timeout": settings.db_connect_timeout,
            "command_timeout": settings.db_command_timeout,
        },
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


def main() -> None:
    version = _target_version()
    offline = context.is_offline_mode()
    db_logger.migration_start(
        version=version,
        description=f"{'Rendering' if offline else 'Applying'} migrations up to {version}",
    )
    try:
        if offline:
            run_migrations_offline()
        else:
            asyncio.run(run_migrations_online())
    except Exception:
        db_logger.migration_end(version=version, success=False)
        raise
    db_logger.migration_end(version=version, success=True)


main()
