# path: powerplant/battery/api/api_v1/battery.py
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from powerplant.battery.api.api_v1.deps import get_battery_service
from powerplant.battery.schemas.battery import (
    BatteriesInRangeResponse,
    BatteryCreate,
    BatteryRangeRequest,
    BatteryRead,
)
from powerplant.battery.services.battery_service import BatteryService
from powerplant.core.models.db_helper import db_helper
from powerplant.core.schemas.common import ApiResponse


router = APIRouter()

SessionDep = Annotated[AsyncSession, Depends(db_helper.session_getter)]
ServiceDep = Annotated[BatteryService, Depends(get_battery_service)]


@router.post(
    "/create",
    response_model=BatteryRead,
    responses={400: {"model": ApiResponse}},
)
async def create_battery(session: SessionDep, service: ServiceDep, battery: BatteryCreate):
    """Create one battery; 400 when the postcode is already used."""
    return await service.create_battery(session, battery)


@router.post("/batteries", response_model=list[BatteryRead])
async def create_batteries(session: SessionDep, service: ServiceDep, batteries: list[BatteryCreate]):
    """
    Bulk create.

    Important:
    - every item is validated before anything is written;
    - postcode uniqueness is NOT checked here unless
      APP_CONFIG__BATTERY__ENFORCE_BULK_UNIQUENESS is set.
    """
    return await service.create_batteries(session, batteries)


@router.get("/batteries", response_model=list[BatteryRead])
async def get_batteries(session: SessionDep, service: ServiceDep):
    return await service.list_batteries(session)


@router.post("/range", response_model=BatteriesInRangeResponse)
async def get_batteries_in_postcode_range(
    session: SessionDep,
    service: ServiceDep,
    params: BatteryRangeRequest,
) -> BatteriesInRangeResponse:
    """Batteries with startPostcode <= postcode <= endPostcode (string order), sorted by name."""
    report = await service.get_batteries_in_postcode_range(session, params)
    return BatteriesInRangeResponse(
        batteries_in_range=[BatteryRead.model_validate(b) for b in report.batteries],
        total_watt_capacity=report.total_capacity,
        average_watt_capacity=report.average_capacity,
    )


@router.get(
    "/{battery_id}",
    response_model=BatteryRead,
    responses={404: {"model": ApiResponse}},
)
async def get_battery(session: SessionDep, service: ServiceDep, battery_id: int):
    return await service.get_battery(session, battery_id)


@router.put(
    "/{battery_id}",
    response_model=BatteryRead,
    responses={400: {"model": ApiResponse}, 404: {"model": ApiResponse}},
)
async def update_battery(session: SessionDep, service: ServiceDep, battery_id: int, battery: BatteryCreate):
    return await service.update_battery(session, battery_id, battery)
