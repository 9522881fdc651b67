"""Market data service for current prices."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from tradesim.core.timezone import now_eastern
from tradesim.domain.views import Quote
from tradesim.providers.quote_source import QuoteSource

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for looking up current prices.

    Wraps a quote source with graceful degradation: when the source raises,
    the last price it successfully returned for the symbol is used instead.
    Satisfies the QuoteSource protocol itself.
    """

    def __init__(self, source: QuoteSource):
        self._source = source
        self._last_known: dict[str, Decimal] = {}

    def current_price(self, symbol: str) -> Optional[Decimal]:
        """Return the latest price for symbol, or None if it is not priced."""
        symbol = symbol.upper()
        try:
            price = self._source.current_price(symbol)
        except Exception:
            # Graceful degradation: fall back to the last good price
            logger.warning("Quote source failed for %s; using last known price", symbol, exc_info=True)
            return self._last_known.get(symbol)

        if price is not None:
            self._last_known[symbol] = price
        return price

    def quotes(self, symbols: Iterable[str]) -> dict[str, Quote]:
        """
        Fetch quotes for symbols.

        Returns dict mapping symbol -> Quote; unpriced symbols are omitted.
        """
        as_of = now_eastern()
        result: dict[str, Quote] = {}
        for symbol in symbols:
            price = self.current_price(symbol)
            if price is not None:
                result[symbol.upper()] = Quote(symbol=symbol.upper(), price=price, as_of=as_of)
        return result
