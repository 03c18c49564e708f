# path: powerplant/core/exceptions.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from powerplant.app_logging import get_logger
from powerplant.core.schemas.common import ApiResponse


log = get_logger("errors")

_LOC_SOURCES = ("body", "path", "query")


class ApiError(Exception):
    """
    Business error raised by services.

    Rendered as {"message": ..., "success": false} with `status_code`.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConflictError(ApiError):
    """A unique business key (battery postcode) is already taken."""


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, field: str, value: Any) -> None:
        super().__init__(f"{resource} not found with {field}: {value}")
        self.resource = resource
        self.field = field
        self.value = value


def validation_errors_to_fields(exc: RequestValidationError) -> dict[str, str]:
    """
    Pydantic errors -> {field: message}.

    Field is the location without its source ("body", "path", "query"):
    "name" for an object body, "0.name" for list bodies, "battery_id" for
    a path parameter. The first message per field wins.
    """
    fields: dict[str, str] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        source = loc[0] if loc else "body"
        if loc and loc[0] in _LOC_SOURCES:
            loc = loc[1:]
        key = ".".join(loc) or source
        fields.setdefault(key, str(err.get("msg", "Invalid value")))
    return fields


async def api_error_handler(request: Request, exc: ApiError) -> ORJSONResponse:
    log.info({"event": "app_error", "path": request.url.path, "status": exc.status_code, "error": exc.message})
    body = ApiResponse(message=exc.message, success=False)
    return ORJSONResponse(body.model_dump(), status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    fields = validation_errors_to_fields(exc)
    log.info({"event": "validation_error", "path": request.url.path, "fields": fields})
    return ORJSONResponse(fields, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    log.error({"event": "unhandled_error", "path": request.url.path, "error": repr(exc)}, exc_info=exc)
    body = ApiResponse(message="Internal server error", success=False)
    return ORJSONResponse(body.model_dump(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
