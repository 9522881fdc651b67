"""Pydantic schemas for watchlist and market endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class WatchlistAddRequest(BaseModel):
    """Optional body when adding a symbol to the watchlist."""

    company_name: Optional[str] = Field(default=None, max_length=255)


class WatchlistEntryResponse(BaseModel):
    """Response schema for a watchlist row."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    price: Optional[Decimal] = None


class WatchlistResponse(BaseModel):
    """Response schema for a watchlist."""

    entries: list[WatchlistEntryResponse]
    count: int


class ListingResponse(BaseModel):
    """Response schema for a market board row."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: str
    price: Decimal
