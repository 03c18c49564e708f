# path: powerplant/battery/services/battery_service.py
from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from powerplant.app_logging import get_logger
from powerplant.battery.models.battery import Battery
from powerplant.battery.schemas.battery import BatteryCreate, BatteryRangeRequest
from powerplant.battery.services.range_aggregator import RangeReport, compute_range_report
from powerplant.core.exceptions import ConflictError, NotFoundError
from powerplant.crud.battery_repository import BatteryRepository, IBatteryRepository


log = get_logger("service.battery")


class BatteryService:
    """
    Battery business rules on top of the store.

    Notes:
    - the repo comes through DI (or a default is created), so the service
      does not depend on a concrete store;
    - single create rejects a postcode that is already stored;
    - bulk create skips that check unless enforce_bulk_uniqueness is set.
      The asymmetry is kept on purpose, see DESIGN.md.
    """

    def __init__(
        self,
        repo: Optional[IBatteryRepository] = None,
        *,
        enforce_bulk_uniqueness: bool = False,
    ) -> None:
        self.repo: IBatteryRepository = repo or BatteryRepository()
        self.enforce_bulk_uniqueness = enforce_bulk_uniqueness

    async def create_battery(self, session: AsyncSession, data: BatteryCreate) -> Battery:
        existing = await self.repo.get_by_postcode(session, postcode=data.postcode)
        if existing is not None:
            log.info({"event": "battery_create_conflict", "postcode": existing.postcode})
            raise ConflictError(f"Battery already exists with battery post code: {existing.postcode}")

        log.info({"event": "battery_create", "postcode": data.postcode})
        return await self.repo.create(
            session,
            name=data.name,
            postcode=data.postcode,
            capacity=data.capacity,
        )

    async def create_batteries(self, session: AsyncSession, items: Sequence[BatteryCreate]) -> List[Battery]:
        if self.enforce_bulk_uniqueness:
            await self._check_bulk_postcodes(session, items)

        batteries = await self.repo.create_many(session, [item.model_dump() for item in items])
        log.info({"event": "batteries_bulk_create", "count": len(batteries)})
        return batteries

    async def _check_bulk_postcodes(self, session: AsyncSession, items: Sequence[BatteryCreate]) -> None:
        counts = Counter(item.postcode for item in items)
        repeated = sorted(pc for pc, n in counts.items() if n > 1)
        if repeated:
            raise ConflictError(f"Duplicate battery post codes in request: {', '.join(repeated)}")

        existing = await self.repo.get_by_postcodes(session, list(counts))
        if existing:
            taken = sorted({b.postcode for b in existing})
            raise ConflictError(f"Battery already exists with battery post code: {', '.join(taken)}")

    async def list_batteries(self, session: AsyncSession) -> List[Battery]:
        return await self.repo.list_all(session)

    async def get_battery(self, session: AsyncSession, battery_id: int) -> Battery:
        battery = await self.repo.get_by_id(session, battery_id=battery_id)
        if battery is None:
            raise NotFoundError("Battery", "batteryId", battery_id)
        return battery

    async def update_battery(self, session: AsyncSession, battery_id: int, data: BatteryCreate) -> Battery:
        """Replace name/postcode/capacity; the id never changes."""
        battery = await self.get_battery(session, battery_id)

        if data.postcode != battery.postcode:
            other = await self.repo.get_by_postcode(session, postcode=data.postcode)
            if other is not None and other.id != battery.id:
                raise ConflictError(f"Battery already exists with battery post code: {other.postcode}")

        await self.repo.update_fields(session, battery_id=battery.id, **data.model_dump())
        log.info({"event": "battery_update", "battery_id": battery.id, "postcode": data.postcode})
        return await self.get_battery(session, battery_id)

    async def get_batteries_in_postcode_range(self, session: AsyncSession, params: BatteryRangeRequest) -> RangeReport:
        batteries = await self.repo.list_all(session)
        report = compute_range_report(batteries, params.start_postcode, params.end_postcode)
        log.info(
            {
                "event": "battery_range_query",
                "start": params.start_postcode,
                "end": params.end_postcode,
                "count": report.count,
            }
        )
        return report
