"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from prorata.api.routes import analysis, calculations, health
from prorata.core.config import AppSettings
from prorata.core.exceptions import InvalidMarketDataError
from prorata.core.logging_config import setup_logging
from prorata.engine.pipeline import TCCCalculator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    setup_logging(settings.log_level)
    app.state.calculator = TCCCalculator(settings=settings)
    yield


async def _invalid_market_data(request: Request, exc: InvalidMarketDataError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(InvalidMarketDataError, _invalid_market_data)
    app.include_router(health.router)
    app.include_router(calculations.router, prefix="/calculations")
    app.include_router(analysis.router)
    return app
