# path: powerplant/core/models/db_helper.py
from __future__ import annotations

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from powerplant.app_logging import get_logger
from powerplant.core.config import settings


log = get_logger("db")


class DatabaseHelper:
    """
    Owns the async engine and the session factory.

    Notes:
    - one AsyncSession per request (see session_getter);
    - the request session commits when the handler returns and rolls back
      when it raises, so a single insert or a bulk insert is atomic.
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        echo_pool: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ) -> None:
        engine_kwargs: dict[str, Any] = {"echo": echo, "echo_pool": echo_pool}
        if not url.startswith("sqlite"):
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)

        self.engine: AsyncEngine = create_async_engine(url=url, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def create_all(self) -> None:
        """Create tables from Base.metadata (local runs without Alembic)."""
        import powerplant.battery.models  # noqa: F401  (registers tables)
        from powerplant.core.models.base import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info({"event": "create_all", "tables": sorted(Base.metadata.tables)})

    async def session_getter(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


db_helper = DatabaseHelper(
    url=settings.db.url,
    echo=settings.db.echo,
    echo_pool=settings.db.echo_pool,
    pool_size=settings.db.pool_size,
    max_overflow=settings.db.max_overflow,
)
