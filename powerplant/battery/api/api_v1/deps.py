# path: powerplant/battery/api/api_v1/deps.py
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from powerplant.battery.services.battery_service import BatteryService
from powerplant.core.config import settings
from powerplant.crud.battery_repository import BatteryRepository, IBatteryRepository


@lru_cache(maxsize=1)
def _repo_singleton() -> BatteryRepository:
    """The repository is stateless, one instance is enough."""
    return BatteryRepository()


def get_battery_repository() -> IBatteryRepository:
    """
    FastAPI Depends provider.

    Returns the interface (IBatteryRepository); tests override it via
    app.dependency_overrides.
    """
    return _repo_singleton()


def get_battery_service(
    repo: IBatteryRepository = Depends(get_battery_repository),
) -> BatteryService:
    return BatteryService(
        repo=repo,
        enforce_bulk_uniqueness=settings.battery.enforce_bulk_uniqueness,
    )
