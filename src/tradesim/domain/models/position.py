"""Position domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Position:
    """
    Aggregated holding of one symbol for one user.

    Exists only while quantity > 0; a position sold down to zero is removed
    rather than kept as an empty row. average_cost is the cost basis per
    share and is left untouched by sells.
    """

    user_id: str
    symbol: str
    quantity: int
    average_cost: Decimal
    company_name: Optional[str] = None
    version: int = 0

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the shares still held."""
        return self.average_cost * self.quantity
