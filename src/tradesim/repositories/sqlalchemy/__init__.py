"""SQLAlchemy repository implementations."""

from tradesim.repositories.sqlalchemy.database import Database, Base
from tradesim.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from tradesim.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from tradesim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from tradesim.repositories.sqlalchemy.watchlist_repo import SqlAlchemyWatchlistRepository
from tradesim.repositories.sqlalchemy.store import (
    SqlAlchemyAccountStore,
    SqlAlchemyStoreSession,
    translate_error,
)

__all__ = [
    "Database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyPositionRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyWatchlistRepository",
    "SqlAlchemyAccountStore",
    "SqlAlchemyStoreSession",
    "translate_error",
]
