"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradesim.app_context import AppContext
from tradesim.config.settings import get_settings
from tradesim.config.logging_config import setup_logging
from tradesim.api.routers import (
    accounts_router,
    orders_router,
    portfolio_router,
    watchlist_router,
)
from tradesim.core.exceptions import AppError

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "VALIDATION_ERROR": 400,
    "INVALID_AMOUNT": 400,
    "INVALID_QUANTITY": 400,
    "NOT_FOUND": 404,
    "ACCOUNT_EXISTS": 409,
    "STORE_CONFLICT": 409,
    "INSUFFICIENT_FUNDS": 422,
    "INSUFFICIENT_POSITION": 422,
    "QUOTE_UNAVAILABLE": 503,
    "STORE_UNAVAILABLE": 503,
}


async def _run_ticker(context: AppContext, interval: float) -> None:
    """Invoke the context's periodic trigger every interval seconds."""
    while True:
        await asyncio.sleep(interval)
        try:
            await asyncio.to_thread(context.tick)
        except Exception:
            logger.exception("Periodic tick failed")


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Pre-built AppContext (tests). When omitted, one is created
            from the global settings at startup and closed at shutdown.
    """
    settings = context.settings if context else get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        ctx = context or AppContext(settings)
        app.state.context = ctx

        ticker: Optional[asyncio.Task] = None
        if settings.price_tick_seconds > 0:
            ticker = asyncio.create_task(_run_ticker(ctx, settings.price_tick_seconds))
        logger.info("%s started", settings.app_name)
        yield
        # Shutdown
        if ticker is not None:
            ticker.cancel()
            with suppress(asyncio.CancelledError):
                await ticker
        if context is None:
            ctx.close()

    app = FastAPI(
        title=settings.app_name,
        description="Simulated stock trading: cash ledger, positions and valuation",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(accounts_router)
    app.include_router(orders_router)
    app.include_router(portfolio_router)
    app.include_router(watchlist_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=_STATUS_BY_CODE.get(exc.code, 400),
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app
