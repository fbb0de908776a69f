"""FastAPI application with lifespan, router mounting and error mapping."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jerseyorders.api.routes import health, orders
from jerseyorders.core.config import AppSettings
from jerseyorders.core.exceptions import (
    InputTooLargeError,
    JerseyOrdersError,
    NoOrderDataError,
    NoValidRowsError,
)
from jerseyorders.core.log import configure_logging

_STATUS_BY_ERROR: dict[type[JerseyOrdersError], int] = {
    NoOrderDataError: 422,
    NoValidRowsError: 422,
    InputTooLargeError: 413,
}


async def _handle_formatter_error(request: Request, exc: JerseyOrdersError) -> JSONResponse:
    status = _STATUS_BY_ERROR.get(type(exc), 400)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        yield

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(JerseyOrdersError, _handle_formatter_error)
    app.include_router(health.router)
    app.include_router(orders.router, prefix="/orders")
    return app
