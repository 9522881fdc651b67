"""Domain layer - pure business models with no external dependencies."""

from tradesim.domain.models import (
    Account,
    Position,
    TransactionRecord,
    WatchlistItem,
    TransactionKind,
    OrderSide,
)

__all__ = [
    "Account",
    "Position",
    "TransactionRecord",
    "WatchlistItem",
    "TransactionKind",
    "OrderSide",
]
