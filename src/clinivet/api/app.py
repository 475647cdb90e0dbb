"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from clinivet.api.routes import health, pets, rut
from clinivet.core.config import AppSettings
from clinivet.core.logging import configure_logging
from clinivet.core.protocols import IPetDirectory
from clinivet.persistence import create_directory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; release the pet directory on shutdown."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level, json_logs=settings.log_json)
    yield
    app.state.directory.close()


def create_app(
    settings: AppSettings | None = None,
    directory: IPetDirectory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = AppSettings()

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.directory = directory if directory is not None else create_directory(settings)

    app.include_router(health.router)
    app.include_router(rut.router, prefix=settings.api.api_prefix)
    app.include_router(pets.router, prefix=settings.api.api_prefix)
    return app
