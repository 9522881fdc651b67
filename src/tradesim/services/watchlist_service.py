"""Watchlist registry service."""

import logging
from typing import Optional

from tradesim.core.timezone import now_eastern
from tradesim.core.exceptions import ValidationError, NotFoundError
from tradesim.domain.models import WatchlistItem
from tradesim.domain.views import WatchlistEntryView
from tradesim.providers.quote_source import QuoteSource
from tradesim.repositories.protocols import AccountStore, StoreSession
from tradesim.services.retry import run_in_transaction

logger = logging.getLogger(__name__)


class WatchlistService:
    """
    Per-user set of watched symbols.

    Add and remove are idempotent. Not part of the financial core: entries
    carry no quantity or cost and never touch balances.
    """

    def __init__(
        self,
        store: AccountStore,
        quote_source: QuoteSource,
        max_retries: int = 3,
    ):
        self._store = store
        self._quotes = quote_source
        self._max_retries = max_retries

    def add(
        self,
        user_id: str,
        symbol: str,
        company_name: Optional[str] = None,
    ) -> WatchlistItem:
        """Add a symbol; adding an already watched symbol returns the existing entry."""
        symbol = self._normalize(symbol)

        def work(uow: StoreSession) -> WatchlistItem:
            if not uow.accounts.get(user_id):
                raise NotFoundError("Account", user_id)
            existing = uow.watchlist.get(user_id, symbol)
            if existing:
                return existing
            return uow.watchlist.add(
                WatchlistItem(
                    user_id=user_id,
                    symbol=symbol,
                    company_name=company_name,
                    added_at=now_eastern(),
                )
            )

        item = run_in_transaction(self._store, work, self._max_retries, f"watch {symbol} for {user_id}")
        logger.debug("Watchlist of %s contains %s", user_id, symbol)
        return item

    def remove(self, user_id: str, symbol: str) -> bool:
        """Remove a symbol; returns False when it was not watched."""
        symbol = self._normalize(symbol)
        with self._store.transaction() as uow:
            return uow.watchlist.remove(user_id, symbol)

    def list_items(self, user_id: str) -> list[WatchlistItem]:
        """List watched symbols in alphabetical order."""
        with self._store.transaction() as uow:
            return uow.watchlist.list_by_user(user_id)

    def list_with_prices(self, user_id: str) -> list[WatchlistEntryView]:
        """List watched symbols with their latest price (None when unquoted)."""
        return [
            WatchlistEntryView(
                symbol=item.symbol,
                company_name=item.company_name,
                price=self._quotes.current_price(item.symbol),
            )
            for item in self.list_items(user_id)
        ]

    @staticmethod
    def _normalize(symbol: str) -> str:
        symbol = (symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Symbol is required")
        return symbol
