"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from tradesim.app_context import AppContext
from tradesim.services import (
    LedgerService,
    ValuationService,
    WatchlistService,
)


def get_context(request: Request) -> AppContext:
    """Provide the AppContext created at startup."""
    return request.app.state.context


def get_ledger_service(ctx: AppContext = Depends(get_context)) -> LedgerService:
    """Provide LedgerService instance."""
    return ctx.ledger


def get_valuation_service(ctx: AppContext = Depends(get_context)) -> ValuationService:
    """Provide ValuationService instance."""
    return ctx.valuation


def get_watchlist_service(ctx: AppContext = Depends(get_context)) -> WatchlistService:
    """Provide WatchlistService instance."""
    return ctx.watchlist
