#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Async SQLAlchemy setup.

The API gets sessions through the ``get_db`` dependency; scripts use
``session_scope()``.  Both commit on success and roll back on error.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from .config import Settings, get_settings


# -----------------------------------------------------------------------------

class Base(DeclarativeBase):
    pass


# -----------------------------------------------------------------------------

def engine_options(url: str, settings: Settings) -> dict:
    """Keyword arguments for ``create_async_engine`` suited to *url*."""
    if url.startswith("sqlite"):
        # aiosqlite runs the connection in a worker thread
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size":     settings.db_pool_size,
        "max_overflow":  settings.db_max_overflow,
        "pool_pre_ping": True,
    }


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_db(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """(Re)create the engine and session factory; returns the engine."""
    global _engine, _session_factory
    settings = get_settings()
    url = url or settings.database_url
    _engine = create_async_engine(
        url,
        echo=settings.db_echo if echo is None else echo,
        **engine_options(url, settings),
    )
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


def get_engine() -> AsyncEngine:
    return _engine if _engine is not None else init_db()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        init_db()
    return _session_factory


# ── Sessions ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    async with session_scope() as session:
        yield session


# -----------------------------------------------------------------------------

async def create_all_tables() -> None:
    """CREATE TABLE IF NOT EXISTS for every model; no migrations."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# -----------------------------------------------------------------------------
