# /powerplant/main.py
from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from powerplant import __version__
from powerplant.app_logging import get_logger
from powerplant.core.api import router as api_router
from powerplant.core.config import settings
from powerplant.core.exceptions import register_exception_handlers
from powerplant.core.models import db_helper

log = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    if settings.db.create_all:
        await db_helper.create_all()
    log.info({"event": "startup", "version": __version__})
    yield
    # shutdown
    await db_helper.dispose()
    log.info({"event": "shutdown"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="powerplant",
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


# exported application object
main_app = create_app()


def main() -> None:
    uvicorn.run(
        "powerplant.main:main_app",
        host=settings.run.host,
        port=settings.run.port,
        reload=settings.run.reload,
    )


if __name__ == "__main__":
    # Run: uvicorn powerplant.main:main_app --reload
    main()
