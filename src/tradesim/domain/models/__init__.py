"""Domain models package."""

from tradesim.domain.models.enums import TransactionKind, OrderSide
from tradesim.domain.models.account import Account
from tradesim.domain.models.position import Position
from tradesim.domain.models.transaction import TransactionRecord
from tradesim.domain.models.watchlist import WatchlistItem

__all__ = [
    "TransactionKind",
    "OrderSide",
    "Account",
    "Position",
    "TransactionRecord",
    "WatchlistItem",
]
