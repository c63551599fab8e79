"""Async SQLAlchemy engine and session handling.

``db_manager`` owns the engine for the lifetime of the app (see the lifespan
in ``brandkit.main``). Request handlers receive a session through
``get_session``; one request is one transaction.
"""

import re
import time
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from brandkit.core.config import Settings, get_settings
from brandkit.core.logging import db_logger, get_logger

logger = get_logger(__name__)

_TABLE_PATTERNS = (
    re.compile(r'relation "([^"]+)"', re.IGNORECASE),
    re.compile(r'INSERT INTO "?(\w+)"?', re.IGNORECASE),
    re.compile(r'UPDATE "?(\w+)"?', re.IGNORECASE),
    re.compile(r'DELETE FROM "?(\w+)"?', re.IGNORECASE),
    re.compile(r'FROM "?(\w+)"?', re.IGNORECASE),
)


class Base(DeclarativeBase):
    """Declarative base for all Brandkit tables."""


def to_async_url(db_url: str) -> str:
    """Rewrite ``postgres://`` / ``postgresql://`` URLs to use asyncpg."""
    for prefix in ("postgres://", "postgresql://"):
        if db_url.startswith(prefix):
            return "postgresql+asyncpg://" + db_url[len(prefix):]
    return db_url


def _engine_options(settings: Settings, db_url: str) -> dict[str, Any]:
    if not db_url.startswith("postgresql+asyncpg://"):
        return {"echo": settings.debug}

    connect_args: dict[str, Any] = {
        "timeout": settings.db_connect_timeout,
        "command_timeout": settings.db_command_timeout,
    }
    # asyncpg takes 'ssl', not libpq's 'sslmode'
    if settings.environment == "production":
        connect_args["ssl"] = "require"

    return {
        "echo": settings.debug,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_pre_ping": True,
        "connect_args": connect_args,
    }


def table_from_error(error: SQLAlchemyError) -> str | None:
    """Best-effort table name for a failed statement, for log context."""
    sources = [str(error)]
    if isinstance(error, DBAPIError) and error.statement:
        sources.insert(0, error.statement)
    for source in sources:
        for pattern in _TABLE_PATTERNS:
            match = pattern.search(source)
            if match:
                return match.group(1)
    return None


class DatabaseManager:
    """Holds the engine and session factory."""

    def __init__(self) -> None:
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_db() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call init_db() first.")
        return self._session_factory

    def init_db(self, db_url: str | None = None) -> None:
        """Create the engine for ``db_url`` (default: ``DATABASE_URL``)."""
        settings = get_settings()
        url = to_async_url(db_url or str(settings.database_url))

        try:
            self._engine = create_async_engine(url, **_engine_options(settings, url))
        except Exception as e:
            db_logger.connection_error(e, url)
            raise

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine initialized", extra={"dialect": self._engine.dialect.name})

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def check_connection(self) -> bool:
        """Run ``SELECT 1``; connection problems are logged, not raised."""
        try:
            async with self.session_factory() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            db_logger.connection_error(e, str(self.engine.url) if self._engine else "")
            return False
        return True

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on exit and rolls back on SQLAlchemy errors.

        Sessions open longer than ``DB_SLOW_QUERY_THRESHOLD_MS`` are reported
        as slow.
        """
        threshold_ms = get_settings().db_slow_query_threshold_ms
        started = time.monotonic()

        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                db_logger.transaction_failure(
                    e,
                    table=table_from_error(e),
                    context="Session rollback after SQLAlchemy error",
                )
                raise
            finally:
                elapsed_ms = (time.monotonic() - started) * 1000
                if elapsed_ms > threshold_ms:
                    db_logger.slow_query(query="session_transaction", duration_ms=elapsed_ms)


db_manager = DatabaseManager()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding the request's session.

    Usage:
        @router.get("/projects")
        async def list_projects(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with db_manager.session_scope() as session:
        yield session
