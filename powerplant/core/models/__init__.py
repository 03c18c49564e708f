# powerplant/core/models/__init__.py

__all__ = (
    "db_helper",
    "Base",
)

from .db_helper import db_helper
from .base import Base

# Feature models (powerplant.battery.models) import Base from here and are
# registered in Base.metadata by their own packages; alembic/env.py imports them.
