"""Fixed-price quote source for offline/testing use."""

from decimal import Decimal
from typing import Mapping, Optional


class StaticQuoteSource:
    """Quote source backed by a fixed symbol -> price mapping."""

    def __init__(self, prices: Optional[Mapping[str, Decimal]] = None):
        self._prices: dict[str, Decimal] = {
            symbol.upper(): Decimal(str(price)) for symbol, price in (prices or {}).items()
        }

    def current_price(self, symbol: str) -> Optional[Decimal]:
        """Return the configured price for symbol, if any."""
        return self._prices.get(symbol.upper())

    def set_price(self, symbol: str, price: Optional[Decimal]) -> None:
        """Set (or with None, clear) the price of a symbol."""
        # Rebind instead of mutating so concurrent readers see a whole snapshot
        prices = dict(self._prices)
        if price is None:
            prices.pop(symbol.upper(), None)
        else:
            prices[symbol.upper()] = Decimal(str(price))
        self._prices = prices
