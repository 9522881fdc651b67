"""TransactionRecord domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradesim.domain.models.enums import TransactionKind


@dataclass(frozen=True)
class TransactionRecord:
    """
    Append-only ledger entry, one per settled order or deposit.

    - BUY/SELL carry symbol, share quantity and the settlement price
    - DEPOSIT has no symbol and is stored as quantity=1, unit_price=amount
    """

    txn_id: str
    user_id: str
    kind: TransactionKind
    quantity: int
    unit_price: Decimal
    timestamp: datetime
    symbol: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, str) and not isinstance(self.kind, TransactionKind):
            object.__setattr__(self, "kind", TransactionKind(self.kind))

    @property
    def amount(self) -> Decimal:
        """Gross amount moved: deposited cash or quantity times price."""
        return self.unit_price * self.quantity

    @property
    def net_cash_impact(self) -> Decimal:
        """
        Signed effect of this record on the cash balance.

        Positive = cash added, Negative = cash removed.
        """
        if self.kind == TransactionKind.BUY:
            return -self.amount
        return self.amount
