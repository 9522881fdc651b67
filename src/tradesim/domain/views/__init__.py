"""View models for service outputs."""

from tradesim.domain.views.portfolio import (
    Quote,
    Listing,
    OrderResult,
    PositionView,
    PortfolioView,
    AllocationItem,
    AllocationView,
    ValueSample,
    WatchlistEntryView,
)

__all__ = [
    "Quote",
    "Listing",
    "OrderResult",
    "PositionView",
    "PortfolioView",
    "AllocationItem",
    "AllocationView",
    "ValueSample",
    "WatchlistEntryView",
]
