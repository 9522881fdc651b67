"""View models for service outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradesim.domain.models import Account, Position, TransactionRecord


@dataclass(frozen=True)
class Quote:
    """Price of a symbol at a point in time."""

    symbol: str
    price: Decimal
    as_of: datetime


@dataclass(frozen=True)
class Listing:
    """Row of the simulated market board."""

    symbol: str
    company_name: str
    price: Decimal


@dataclass
class OrderResult:
    """
    Outcome of a settled order.

    Carries enough state for callers to refresh their views without
    re-querying: the account after settlement, the position after
    settlement (None when it was sold down and removed) and the record
    appended to the transaction log.
    """

    account: Account
    position: Optional[Position]
    transaction: TransactionRecord
    position_closed: bool = False


@dataclass
class PositionView:
    """View model for a single holding with its current valuation."""

    symbol: str
    quantity: int
    average_cost: Decimal
    market_value: Decimal
    company_name: Optional[str] = None
    market_price: Optional[Decimal] = None
    priced: bool = False

    @property
    def unrealized_pnl(self) -> Decimal:
        """Market value minus the cost basis of the shares held."""
        return self.market_value - (self.average_cost * self.quantity).quantize(Decimal("0.01"))


@dataclass
class PortfolioView:
    """Valued positions of a user together with the account totals."""

    positions: list[PositionView]
    portfolio_value: Decimal
    cash_balance: Decimal
    total_equity: Decimal


@dataclass
class AllocationItem:
    """Single item in allocation breakdown."""

    symbol: str
    market_value: Decimal
    percentage: Decimal


@dataclass
class AllocationView:
    """Portfolio allocation breakdown."""

    items: list[AllocationItem] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    as_of: Optional[datetime] = None


@dataclass(frozen=True)
class ValueSample:
    """One point of the rolling portfolio value series."""

    sequence_index: int
    value: Decimal


@dataclass
class WatchlistEntryView:
    """Watchlist row with the latest known price."""

    symbol: str
    company_name: Optional[str] = None
    price: Optional[Decimal] = None
