"""Repository layer - data access abstractions and implementations."""

from tradesim.repositories.protocols import (
    AccountRepository,
    PositionRepository,
    TransactionRepository,
    WatchlistRepository,
    AccountStore,
    StoreSession,
)

__all__ = [
    "AccountRepository",
    "PositionRepository",
    "TransactionRepository",
    "WatchlistRepository",
    "AccountStore",
    "StoreSession",
]
