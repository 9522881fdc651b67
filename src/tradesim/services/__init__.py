"""Service layer - business logic orchestration."""

from tradesim.services.ledger_service import LedgerService
from tradesim.services.market_data_service import MarketDataService
from tradesim.services.valuation_service import ValuationService
from tradesim.services.value_series import RollingValueSeries
from tradesim.services.watchlist_service import WatchlistService

__all__ = [
    "LedgerService",
    "MarketDataService",
    "ValuationService",
    "RollingValueSeries",
    "WatchlistService",
]
