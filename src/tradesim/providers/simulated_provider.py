"""Random-walk quote source simulating a live market board."""

import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from tradesim.domain.views import Listing

CENT = Decimal("0.01")

# Default board of the simulator
DEFAULT_LISTINGS: tuple[Listing, ...] = (
    Listing("TCS", "Tata Consultancy", Decimal("3821.50")),
    Listing("INFY", "Infosys Ltd", Decimal("1445.75")),
    Listing("HDFC", "HDFC Bank", Decimal("1602.90")),
    Listing("RELI", "Reliance Industries", Decimal("2904.40")),
    Listing("WIPR", "Wipro Ltd", Decimal("468.10")),
)


class SimulatedQuoteSource:
    """
    Quote source whose prices follow a bounded random walk.

    Each call to tick() moves every price by a uniform relative change in
    [-volatility/2, +volatility/2], rounded to cents and floored at one cent.
    A tick publishes a brand-new tuple of listings, so readers always see a
    consistent board without taking a lock. The source holds no timer; an
    external trigger decides when to tick.
    """

    def __init__(
        self,
        listings: Iterable[Listing] = DEFAULT_LISTINGS,
        seed: Optional[int] = None,
        volatility: float = 0.02,
    ):
        self._rng = random.Random(seed)
        self._volatility = volatility
        self._board: tuple[Listing, ...] = tuple(
            Listing(item.symbol.upper(), item.company_name, item.price) for item in listings
        )

    def current_price(self, symbol: str) -> Optional[Decimal]:
        """Return the latest simulated price for symbol, if listed."""
        symbol = symbol.upper()
        for listing in self._board:
            if listing.symbol == symbol:
                return listing.price
        return None

    def company_name(self, symbol: str) -> Optional[str]:
        """Return the listed company name for symbol, if listed."""
        symbol = symbol.upper()
        for listing in self._board:
            if listing.symbol == symbol:
                return listing.company_name
        return None

    def listings(self) -> list[Listing]:
        """Return the current market board."""
        return list(self._board)

    def tick(self) -> list[Listing]:
        """Advance every price by one random-walk step and return the new board."""
        board = []
        for listing in self._board:
            change = Decimal(str((self._rng.random() - 0.5) * self._volatility))
            price = (listing.price * (1 + change)).quantize(CENT, rounding=ROUND_HALF_UP)
            board.append(Listing(listing.symbol, listing.company_name, max(price, CENT)))
        self._board = tuple(board)
        return list(self._board)
