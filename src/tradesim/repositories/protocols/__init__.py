"""Repository protocol definitions (interfaces)."""

from tradesim.repositories.protocols.account_repo import AccountRepository
from tradesim.repositories.protocols.position_repo import PositionRepository
from tradesim.repositories.protocols.transaction_repo import TransactionRepository
from tradesim.repositories.protocols.watchlist_repo import WatchlistRepository
from tradesim.repositories.protocols.store import AccountStore, StoreSession

__all__ = [
    "AccountRepository",
    "PositionRepository",
    "TransactionRepository",
    "WatchlistRepository",
    "AccountStore",
    "StoreSession",
]
