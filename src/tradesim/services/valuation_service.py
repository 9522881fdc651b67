"""Valuation service for portfolio reporting."""

from decimal import Decimal, ROUND_HALF_UP

from tradesim.core.timezone import now_eastern
from tradesim.domain.models import Position
from tradesim.domain.views import (
    PositionView,
    PortfolioView,
    AllocationItem,
    AllocationView,
    ValueSample,
)
from tradesim.providers.quote_source import QuoteSource
from tradesim.services.ledger_service import LedgerService
from tradesim.services.value_series import RollingValueSeries

CENT = Decimal("0.01")


def _total(rows: list[PositionView]) -> Decimal:
    return sum((row.market_value for row in rows), Decimal("0")).quantize(CENT)


class ValuationService:
    """
    Service for portfolio valuation and reporting.

    Values positions at the current quote. A held symbol without a quote is
    valued at its average cost, so valuation never fails for missing prices.
    Read-only: never mutates ledger state.
    """

    def __init__(
        self,
        ledger_service: LedgerService,
        quote_source: QuoteSource,
    ):
        self._ledger = ledger_service
        self._quotes = quote_source

    def position_market_value(self, position: Position) -> Decimal:
        """
        Market value of one position.

        Formula: quantity × current price (average cost if unpriced)
        """
        price = self._quotes.current_price(position.symbol)
        if price is None:
            price = position.average_cost
        return (price * position.quantity).quantize(CENT, rounding=ROUND_HALF_UP)

    def portfolio_value(self, user_id: str) -> Decimal:
        """Sum of the market values of all positions of a user."""
        return _total(self.positions_with_values(user_id))

    def total_equity(self, user_id: str) -> Decimal:
        """Cash balance plus portfolio value."""
        return self.portfolio(user_id).total_equity

    def portfolio(self, user_id: str) -> PortfolioView:
        """
        Valued positions with portfolio value, cash and total equity.

        Every total is computed from the same priced rows, so the figures
        agree even while quotes are moving.
        """
        account = self._ledger.get_account(user_id)
        rows = self.positions_with_values(user_id)
        portfolio_value = _total(rows)
        return PortfolioView(
            positions=rows,
            portfolio_value=portfolio_value,
            cash_balance=account.cash_balance,
            total_equity=(account.cash_balance + portfolio_value).quantize(CENT),
        )

    def positions_with_values(self, user_id: str) -> list[PositionView]:
        """
        Get positions enriched with current market prices.

        Rows without a quote carry market_price=None, priced=False and are
        valued at cost.
        """
        result: list[PositionView] = []
        for position in self._ledger.list_positions(user_id):
            price = self._quotes.current_price(position.symbol)
            reference = price if price is not None else position.average_cost
            result.append(
                PositionView(
                    symbol=position.symbol,
                    company_name=position.company_name,
                    quantity=position.quantity,
                    average_cost=position.average_cost,
                    market_price=price,
                    market_value=(reference * position.quantity).quantize(CENT, rounding=ROUND_HALF_UP),
                    priced=price is not None,
                )
            )
        return result

    def allocation(self, user_id: str) -> AllocationView:
        """
        Calculate portfolio allocation breakdown.

        Returns market value and percentage for each holding.
        """
        items: list[AllocationItem] = []
        total_value = Decimal("0")

        for row in self.positions_with_values(user_id):
            total_value += row.market_value
            items.append(
                AllocationItem(
                    symbol=row.symbol,
                    market_value=row.market_value,
                    percentage=Decimal("0"),  # Will be calculated below
                )
            )

        # Calculate percentages
        if total_value != Decimal("0"):
            for item in items:
                item.percentage = (item.market_value / total_value * 100).quantize(CENT)

        # Sort by market value descending
        items.sort(key=lambda x: x.market_value, reverse=True)

        return AllocationView(
            items=items,
            total_value=total_value.quantize(CENT),
            as_of=now_eastern(),
        )

    def sample(self, user_id: str, series: RollingValueSeries) -> ValueSample:
        """Append the current portfolio value of a user to a rolling series."""
        return series.append(self.portfolio_value(user_id))
