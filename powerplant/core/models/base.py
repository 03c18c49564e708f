# powerplant/core/models/base.py
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

from powerplant.core.config import settings


class Base(DeclarativeBase):
    """Shared declarative base; constraint names follow the configured convention."""

    metadata = MetaData(naming_convention=settings.db.naming_convention)
