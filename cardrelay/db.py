"""Async SQLAlchemy database handle."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .repositories.tables import Base


class Database:
    """Owns one engine and its session factory.

    Created at application startup and passed to the SQL stores; disposed
    at shutdown.
    """

    def __init__(self, url: str, *, echo: bool = False, engine: Optional[AsyncEngine] = None):
        self._url = url
        self._engine = engine or self._create_engine(url, echo)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)

    @staticmethod
    def _create_engine(url: str, echo: bool) -> AsyncEngine:
        if url.startswith("sqlite") and ":memory:" in url:
            # One shared connection so every session sees the same database
            return create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(url, echo=echo, pool_pre_ping=True)

    @property
    def url(self) -> str:
        return self._url

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def session(self) -> AsyncSession:
        """Open a new session."""
        return self._session_factory()

    async def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()
