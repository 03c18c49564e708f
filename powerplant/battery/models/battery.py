# path: powerplant/battery/models/battery.py
from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from powerplant.core.models.base import Base

# Integer columns are 32-bit on Postgres
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Battery(Base):
    """
    Table batteries: one row per battery installation.

    postcode is a plain string and is compared lexicographically by the
    range report ("61" lies between "6050" and "6200"). The index is not unique: single create
    rejects duplicates in the service, bulk create does not.
    """

    __tablename__ = "batteries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    postcode: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    # watts
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r}, name={self.name!r}, postcode={self.postcode!r}, capacity={self.capacity!r})"
