"""Pydantic schemas for API request/response."""

from tradesim.api.schemas.account import (
    AccountCreate,
    DepositRequest,
    AccountResponse,
    TransactionResponse,
    TransactionListResponse,
)
from tradesim.api.schemas.order import (
    OrderRequest,
    PositionResponse,
    OrderResponse,
)
from tradesim.api.schemas.portfolio import (
    PositionValueResponse,
    PortfolioResponse,
    AllocationItemResponse,
    AllocationResponse,
    ValueSampleResponse,
    ValueSeriesResponse,
)
from tradesim.api.schemas.watchlist import (
    WatchlistAddRequest,
    WatchlistEntryResponse,
    WatchlistResponse,
    ListingResponse,
)

__all__ = [
    "AccountCreate",
    "DepositRequest",
    "AccountResponse",
    "TransactionResponse",
    "TransactionListResponse",
    "OrderRequest",
    "PositionResponse",
    "OrderResponse",
    "PositionValueResponse",
    "PortfolioResponse",
    "AllocationItemResponse",
    "AllocationResponse",
    "ValueSampleResponse",
    "ValueSeriesResponse",
    "WatchlistAddRequest",
    "WatchlistEntryResponse",
    "WatchlistResponse",
    "ListingResponse",
]
