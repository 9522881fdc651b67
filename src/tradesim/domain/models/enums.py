"""Enumerations for domain models."""

from enum import Enum


class TransactionKind(str, Enum):
    """Kinds of ledger transaction records."""

    BUY = "BUY"
    SELL = "SELL"
    DEPOSIT = "DEPOSIT"


class OrderSide(str, Enum):
    """Side of a market order."""

    BUY = "BUY"
    SELL = "SELL"

    @property
    def transaction_kind(self) -> TransactionKind:
        """Return the transaction kind recorded when this side settles."""
        return TransactionKind(self.value)
