"""Quote source protocol."""

from decimal import Decimal
from typing import Optional, Protocol


class QuoteSource(Protocol):
    """
    Protocol for current-price lookups.

    Implementations return the latest known price for a symbol, or None
    when the symbol is not priced. Absence is a normal answer, not an
    error. Implementations must be safe to read from several threads.
    """

    def current_price(self, symbol: str) -> Optional[Decimal]:
        """Return the latest price for symbol, or None if unknown."""
        ...
