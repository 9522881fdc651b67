"""Watchlist and market board endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from tradesim.api.deps import get_context, get_watchlist_service
from tradesim.api.schemas import (
    WatchlistAddRequest,
    WatchlistEntryResponse,
    WatchlistResponse,
    ListingResponse,
)
from tradesim.app_context import AppContext
from tradesim.services import WatchlistService

router = APIRouter(tags=["watchlist"])


@router.get("/accounts/{user_id}/watchlist", response_model=WatchlistResponse)
def get_watchlist(
    user_id: str,
    watchlist: WatchlistService = Depends(get_watchlist_service),
):
    """List watched symbols with their latest prices."""
    entries = watchlist.list_with_prices(user_id)
    return WatchlistResponse(
        entries=[WatchlistEntryResponse.model_validate(e) for e in entries],
        count=len(entries),
    )


@router.put("/accounts/{user_id}/watchlist/{symbol}", response_model=WatchlistEntryResponse)
def add_to_watchlist(
    user_id: str,
    symbol: str,
    data: Optional[WatchlistAddRequest] = None,
    ctx: AppContext = Depends(get_context),
):
    """Watch a symbol (idempotent)."""
    company_name = data.company_name if data else None
    if company_name is None:
        lookup = getattr(ctx.quote_source, "company_name", None)
        company_name = lookup(symbol) if callable(lookup) else None
    item = ctx.watchlist.add(user_id, symbol, company_name=company_name)
    return WatchlistEntryResponse(
        symbol=item.symbol,
        company_name=item.company_name,
        price=ctx.market_data.current_price(item.symbol),
    )


@router.delete("/accounts/{user_id}/watchlist/{symbol}", status_code=204)
def remove_from_watchlist(
    user_id: str,
    symbol: str,
    watchlist: WatchlistService = Depends(get_watchlist_service),
):
    """Stop watching a symbol (idempotent)."""
    watchlist.remove(user_id, symbol)
    return Response(status_code=204)


@router.get("/market", response_model=list[ListingResponse])
def get_market(ctx: AppContext = Depends(get_context)):
    """Current simulated market board."""
    listings = getattr(ctx.quote_source, "listings", None)
    if not callable(listings):
        return []
    return [ListingResponse.model_validate(item) for item in listings()]
