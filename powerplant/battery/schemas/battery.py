# path: powerplant/battery/schemas/battery.py
from __future__ import annotations

from pydantic import Field, field_validator

from powerplant.battery.models.battery import INT32_MAX, INT32_MIN
from powerplant.core.schemas.common import CamelSchema, ORMBaseSchema, require_text


class BatteryCreate(ORMBaseSchema):
    """
    Body of POST /battery/create, the items of POST /battery/batteries
    and of PUT /battery/{battery_id}.

    Missing name/postcode default to "" so that a missing field and a blank
    one report the same message.
    """
    name: str = Field(default="", validate_default=True, examples=["Cannington"])
    postcode: str = Field(default="", validate_default=True, examples=["6107"])
    capacity: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, examples=[13500])

    @field_validator("name", mode="before")
    @classmethod
    def _name_mandatory(cls, v: object) -> object:
        return require_text(v, "Name is mandatory")

    @field_validator("postcode", mode="before")
    @classmethod
    def _postcode_mandatory(cls, v: object) -> object:
        return require_text(v, "Post code is mandatory")


class BatteryRead(ORMBaseSchema):
    id: int
    name: str
    postcode: str
    capacity: int


class BatteryRangeRequest(CamelSchema):
    """Closed postcode interval [startPostcode, endPostcode]."""

    start_postcode: str = Field(default="", validate_default=True, examples=["6050"])
    end_postcode: str = Field(default="", validate_default=True, examples=["6200"])

    @field_validator("start_postcode", mode="before")
    @classmethod
    def _start_mandatory(cls, v: object) -> object:
        return require_text(v, "Start post code is mandatory")

    @field_validator("end_postcode", mode="before")
    @classmethod
    def _end_mandatory(cls, v: object) -> object:
        return require_text(v, "End post code is mandatory")


class BatteriesInRangeResponse(CamelSchema):
    batteries_in_range: list[BatteryRead] = Field(default_factory=list)
    total_watt_capacity: int = 0
    average_watt_capacity: float = 0.0
