# path: powerplant/crud/battery_repository.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from powerplant.app_logging import get_logger
from powerplant.battery.models.battery import INT32_MAX, Battery


log = get_logger("repo.battery")


class IBatteryRepository(Protocol):
    """
    Battery store contract (DI).

    Why:
    - services depend on the Protocol, not on SQLAlchemy;
    - easy to replace with an in-memory double in tests;
    - used as the type in Depends.

    The store enforces no postcode uniqueness; that is a service rule.
    """

    async def create(self, session: AsyncSession, *, name: str, postcode: str, capacity: int) -> Battery: ...
    async def create_many(self, session: AsyncSession, rows: Sequence[Dict[str, Any]]) -> List[Battery]: ...
    async def list_all(self, session: AsyncSession) -> List[Battery]: ...
    async def get_by_id(self, session: AsyncSession, *, battery_id: int) -> Optional[Battery]: ...
    async def get_by_postcode(self, session: AsyncSession, *, postcode: str) -> Optional[Battery]: ...
    async def get_by_postcodes(self, session: AsyncSession, postcodes: Sequence[str]) -> List[Battery]: ...
    async def update_fields(self, session: AsyncSession, *, battery_id: int, **fields: Any) -> None: ...


class BatteryRepository(IBatteryRepository):
    """
    Repository for the batteries table.

    Rule:
    - SQL/DB calls live only here (powerplant/crud/).
    - Writes flush, the request session (db_helper.session_getter) commits.
    """

    async def create(self, session: AsyncSession, *, name: str, postcode: str, capacity: int) -> Battery:
        battery = Battery(name=name, postcode=postcode, capacity=capacity)
        session.add(battery)
        await session.flush()
        return battery

    async def create_many(self, session: AsyncSession, rows: Sequence[Dict[str, Any]]) -> List[Battery]:
        """Insert all rows in one flush; ids come back in input order."""
        batteries = [Battery(**row) for row in rows]
        if not batteries:
            return []

        session.add_all(batteries)
        await session.flush()
        log.info({"event": "create_many", "count": len(batteries)})
        return batteries

    async def list_all(self, session: AsyncSession) -> List[Battery]:
        res = await session.execute(select(Battery).order_by(Battery.id))
        return list(res.scalars())

    async def get_by_id(self, session: AsyncSession, *, battery_id: int) -> Optional[Battery]:
        """None also for ids the id column cannot hold (the driver would overflow)."""
        if not 1 <= int(battery_id) <= INT32_MAX:
            return None
        return await session.get(Battery, int(battery_id))

    async def get_by_postcode(self, session: AsyncSession, *, postcode: str) -> Optional[Battery]:
        """First battery with this postcode or None (bulk inserts may have stored several)."""
        stmt = select(Battery).where(Battery.postcode == postcode).order_by(Battery.id).limit(1)
        return (await session.execute(stmt)).scalar_one_or_none()

    async def get_by_postcodes(self, session: AsyncSession, postcodes: Sequence[str]) -> List[Battery]:
        wanted = sorted({str(p) for p in postcodes})
        if not wanted:
            return []

        res = await session.execute(select(Battery).where(Battery.postcode.in_(wanted)).order_by(Battery.id))
        return list(res.scalars())

    async def update_fields(self, session: AsyncSession, *, battery_id: int, **fields: Any) -> None:
        if not fields or not 1 <= int(battery_id) <= INT32_MAX:
            return
        await session.execute(
            update(Battery)
            .where(Battery.id == int(battery_id))
            .values(**fields)
            .execution_options(synchronize_session="fetch")
        )
