"""Async SQLAlchemy database session and engine configuration."""

import logging
import subprocess
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text

from cardstudio.config import get_settings

logger = logging.getLogger(__name__)

_db_available = False


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all ORM models."""

    pass


settings = get_settings()

_db_url = settings.async_database_url

# Pool sizing only applies to server databases; SQLite uses its own pools
_engine_kwargs: dict = {"echo": settings.debug, "pool_pre_ping": True}
if _db_url.startswith("postgresql"):
    _engine_kwargs.update(pool_size=10, max_overflow=20)

engine = create_async_engine(_db_url, **_engine_kwargs)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — yields one session per request.

    The whole request runs in a single transaction: committed when the
    handler returns, rolled back when it raises.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Check DB connectivity and optionally run migrations."""
    global _db_available
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

        if settings.auto_migrate_on_startup:
            subprocess.run(
                ["alembic", "upgrade", "head"],
                check=True,
                capture_output=True,
                text=True,
            )
        _db_available = True
        logger.info("Database connected.")
    except Exception as exc:
        _db_available = False
        logger.warning(
            "Database unavailable — profile/design endpoints will fail. Error: %s",
            exc,
        )


async def close_db() -> None:
    """Dispose engine. Called during app shutdown."""
    await engine.dispose()


def is_db_available() -> bool:
    """Check if the database connection was established."""
    return _db_available
