from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import powerplant.battery.models  # noqa: F401
from powerplant.core.models import Base, db_helper
from powerplant.main import create_app


@dataclass
class Item:
    """Plain battery value object for aggregator tests."""

    name: str
    postcode: str
    capacity: int


@pytest.fixture
def perth_batteries() -> list[Item]:
    return [
        Item("Cannington", "6107", 13500),
        Item("Midland", "6057", 50500),
        Item("Mount Adams", "6525", 12000),
    ]


@pytest_asyncio.fixture
async def session_factory(tmp_path: Path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as s:
        yield s


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]):
    app = create_app()

    async def _session_getter() -> AsyncIterator[AsyncSession]:
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[db_helper.session_getter] = _session_getter
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
