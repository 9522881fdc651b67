"""Application context: explicit construction of all services.

The process entry point builds one AppContext, hands it to the HTTP layer
(or any other caller) and closes it on shutdown. Nothing here is a lazily
initialized global.
"""

import logging
import threading
from typing import Optional

from tradesim.config.settings import Settings, get_settings
from tradesim.domain.views import ValueSample
from tradesim.providers.quote_source import QuoteSource
from tradesim.providers.simulated_provider import SimulatedQuoteSource
from tradesim.repositories.sqlalchemy import Database, SqlAlchemyAccountStore
from tradesim.services import (
    LedgerService,
    MarketDataService,
    ValuationService,
    RollingValueSeries,
    WatchlistService,
)

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to all services.

    Owns the database handle, the quote source and one rolling value
    series per tracked user.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        quote_source: Optional[QuoteSource] = None,
        database: Optional[Database] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Configuration; the global settings when omitted.
            quote_source: Price source; a seeded random walk when omitted.
            database: Database handle; built from settings when omitted.
        """
        self._settings = settings or get_settings()
        self._database = database or Database(
            url=self._settings.get_database_url(),
            timeout_seconds=self._settings.store_timeout_seconds,
        )
        self._database.create_all()

        self._quote_source = quote_source or SimulatedQuoteSource(seed=self._settings.quote_seed)
        self._store = SqlAlchemyAccountStore(self._database)
        self._market_data = MarketDataService(self._quote_source)

        retries = self._settings.order_max_retries
        self._ledger = LedgerService(self._store, self._market_data, max_retries=retries)
        self._valuation = ValuationService(self._ledger, self._market_data)
        self._watchlist = WatchlistService(self._store, self._market_data, max_retries=retries)

        self._series: dict[str, RollingValueSeries] = {}
        self._series_lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def database(self) -> Database:
        return self._database

    @property
    def quote_source(self) -> QuoteSource:
        return self._quote_source

    @property
    def market_data(self) -> MarketDataService:
        return self._market_data

    @property
    def ledger(self) -> LedgerService:
        return self._ledger

    @property
    def valuation(self) -> ValuationService:
        return self._valuation

    @property
    def watchlist(self) -> WatchlistService:
        return self._watchlist

    # Rolling value series

    def value_series(self, user_id: str) -> RollingValueSeries:
        """Get (creating on first use) the rolling value series of a user."""
        with self._series_lock:
            series = self._series.get(user_id)
            if series is None:
                series = RollingValueSeries(self._settings.value_series_capacity)
                self._series[user_id] = series
            return series

    def record_value(self, user_id: str) -> ValueSample:
        """Sample the current portfolio value of a user into their series."""
        return self._valuation.sample(user_id, self.value_series(user_id))

    def tick(self) -> None:
        """
        Periodic trigger: advance simulated prices, then sample every tracked user.

        Reads ledger state only. A failed price step is logged and sampling
        goes ahead at the previous prices; a failure for one user is logged
        and does not stop sampling of the others.
        """
        advance = getattr(self._quote_source, "tick", None)
        if callable(advance):
            try:
                advance()
            except Exception:
                logger.exception("Could not advance quotes")

        with self._series_lock:
            users = list(self._series)
        for user_id in users:
            try:
                self.record_value(user_id)
            except Exception:
                logger.exception("Could not sample portfolio value for %s", user_id)

    def close(self) -> None:
        """Clean up resources."""
        self._database.dispose()
