# powerplant/core/api/api_v1/__init__.py
from fastapi import APIRouter

from .health import router as health_router
from powerplant.battery.api.api_v1 import router as battery_router


router = APIRouter()

# /health
router.include_router(health_router, tags=["health"])

# /battery/create, /battery/batteries, /battery/range, /battery/{battery_id}
router.include_router(battery_router)
