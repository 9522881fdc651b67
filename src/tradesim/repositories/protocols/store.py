"""Account store (unit of work) protocol."""

from contextlib import AbstractContextManager
from typing import Protocol

from tradesim.repositories.protocols.account_repo import AccountRepository
from tradesim.repositories.protocols.position_repo import PositionRepository
from tradesim.repositories.protocols.transaction_repo import TransactionRepository
from tradesim.repositories.protocols.watchlist_repo import WatchlistRepository


class StoreSession(Protocol):
    """Repositories bound to one store transaction."""

    accounts: AccountRepository
    positions: PositionRepository
    transactions: TransactionRepository
    watchlist: WatchlistRepository


class AccountStore(Protocol):
    """
    Durable store for accounts, positions, the transaction log and watchlists.

    transaction() opens a unit of work. Everything written through the
    yielded session commits together when the block exits cleanly and is
    rolled back when it raises. Write conflicts surface as
    StoreConflictError, other failures as StoreUnavailableError.
    """

    def transaction(self) -> AbstractContextManager[StoreSession]:
        """Open a unit of work."""
        ...
