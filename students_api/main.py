"""Students API: FastAPI application and server entry point.

Run with `students-api` (or `python -m students_api.main`); settings come
from the environment, see `students_api.config`.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from students_api.config import Settings, get_settings
from students_api.database import SqliteStorage, Storage
from students_api.error_handlers import register_error_handlers
from students_api.logger import setup_logging
from students_api.routers import health, student

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if app.state.storage is None:
        app.state.storage = SqliteStorage(settings.storage_path)
    logger.info(
        f"Storage initialized at {settings.storage_path}",
        extra={"env": settings.env},
    )
    yield
    logger.info("Students API shutting down")


def create_app(storage: Optional[Storage] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Without `storage`, a SqliteStorage is opened at startup."""
    settings = settings or get_settings()

    app = FastAPI(title="Students API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage

    register_error_handlers(app)
    app.include_router(student.router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix=settings.api_prefix)
    return app


app = create_app()


def run():
    settings = get_settings()
    uvicorn.run("students_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
