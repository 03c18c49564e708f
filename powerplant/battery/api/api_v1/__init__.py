# powerplant/battery/api/api_v1/__init__.py
from __future__ import annotations

from fastapi import APIRouter

from powerplant.core.config import settings
from .battery import router as battery_router

router = APIRouter()
router.include_router(battery_router, prefix=settings.api.battery, tags=["battery"])
