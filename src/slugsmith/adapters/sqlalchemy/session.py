"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session

from slugsmith.adapters.sqlalchemy.listener import SlugFlushListener


class SqlAlchemySessionFactory:
    """Creates async SQLAlchemy sessions whose flushes assign slugs.

    The listener is attached to a private ``Session`` subclass used as the
    ``sync_session_class``, so other sessions in the process are untouched.
    """

    def __init__(
        self,
        database_url: str,
        *,
        slug_listener: SlugFlushListener | None = None,
        **engine_kwargs: Any,
    ) -> None:
        self._engine = create_async_engine(database_url, **engine_kwargs)
        self._sync_session_class: type[Session] = type("SluggedSession", (Session,), {})
        if slug_listener is not None:
            slug_listener.install(self._sync_session_class)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            sync_session_class=self._sync_session_class,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def sync_session_class(self) -> type[Session]:
        return self._sync_session_class

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
