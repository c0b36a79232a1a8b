from __future__ import annotations

from contextlib import asynccontextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import Any, AsyncIterator, Type, TypeVar, cast

from sqlalchemy import DateTime, TypeDecorator
from sqlalchemy.engine import Dialect, Result
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import Executable, Select, select

from api.settings import settings
from api.utils.utc import as_utc


T = TypeVar("T")


class Base(DeclarativeBase):
    pass


class UTCDateTime(TypeDecorator[datetime]):
    """DateTime column stored as naive UTC and loaded as timezone aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)


def filter_by(cls: Type[T], *args: Any, **kwargs: Any) -> Select[tuple[T]]:
    return select(cls).where(*args).filter_by(**kwargs)


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        # a memory database only lives as long as its single connection
        if ":memory:" in url:
            return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        return {}

    return {
        "pool_pre_ping": True,
        "pool_recycle": settings.pool_recycle,
        "pool_size": settings.pool_size,
        "max_overflow": settings.max_overflow,
    }


class DB:
    def __init__(self, url: str, echo: bool = False):
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **_engine_options(url))
        self._sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        self._session: ContextVar[AsyncSession | None] = ContextVar("session", default=None)

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @property
    def session(self) -> AsyncSession:
        if (session := self._session.get()) is None:
            raise RuntimeError("No database session in this context")
        return session

    async def add(self, obj: T) -> T:
        self.session.add(obj)
        return obj

    async def merge(self, obj: T) -> T:
        return await self.session.merge(obj)

    async def exec(self, statement: Executable) -> Result[Any]:
        return await self.session.execute(statement)

    async def first(self, statement: Select[tuple[T]]) -> T | None:
        return cast(T | None, (await self.exec(statement)).scalars().first())

    async def get(self, cls: Type[T], *args: Any, **kwargs: Any) -> T | None:
        return await self.first(filter_by(cls, *args, **kwargs))

    async def flush(self) -> None:
        await self.session.flush()

    @asynccontextmanager
    async def context(self) -> AsyncIterator[AsyncSession]:
        """Open a session for the current context, commit on success and roll back on error."""

        session = self._sessionmaker()
        token = self._session.set(session)
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            self._session.reset(token)
            await session.close()


db = DB(settings.database_url, echo=settings.sql_show_statements)


def db_context() -> Any:
    return db.context()

