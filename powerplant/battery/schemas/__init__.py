# path: powerplant/battery/schemas/__init__.py
from __future__ import annotations

from powerplant.battery.schemas.battery import (
    BatteriesInRangeResponse,
    BatteryCreate,
    BatteryRangeRequest,
    BatteryRead,
)

__all__ = [
    "BatteriesInRangeResponse",
    "BatteryCreate",
    "BatteryRangeRequest",
    "BatteryRead",
]
