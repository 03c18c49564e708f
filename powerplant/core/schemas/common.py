# path: powerplant/core/schemas/common.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class ORMBaseSchema(BaseModel):
    """
    Base schema for responses built from ORM rows (pydantic v2).
    """
    model_config = ConfigDict(from_attributes=True)


class CamelSchema(BaseModel):
    """
    Wire format is camelCase (startPostcode, totalWattCapacity, ...);
    python attributes stay snake_case.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel):
    """
    Body of business errors: {"message": "...", "success": false}.
    """
    message: str
    success: bool = False


def require_text(value: object, message: str) -> object:
    """
    Blank check for mandatory string fields.

    Raises a custom error type so the validation handler can return
    `message` unchanged (no "Value error, " prefix).
    """
    if value is None or not str(value).strip():
        raise PydanticCustomError("mandatory", message)
    return value
