# path: powerplant/battery/models/__init__.py
from __future__ import annotations

from powerplant.battery.models.battery import Battery

__all__ = ["Battery"]
