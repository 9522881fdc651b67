"""SQLAlchemy implementation of the AccountStore unit of work."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from tradesim.core.exceptions import AppError, StoreConflictError, StoreUnavailableError
from tradesim.repositories.sqlalchemy.database import Database
from tradesim.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from tradesim.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from tradesim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from tradesim.repositories.sqlalchemy.watchlist_repo import SqlAlchemyWatchlistRepository

logger = logging.getLogger(__name__)


class SqlAlchemyStoreSession:
    """Repositories sharing one SQLAlchemy session (one unit of work)."""

    def __init__(self, db: Session):
        self.db = db
        self.accounts = SqlAlchemyAccountRepository(db)
        self.positions = SqlAlchemyPositionRepository(db)
        self.transactions = SqlAlchemyTransactionRepository(db)
        self.watchlist = SqlAlchemyWatchlistRepository(db)


def translate_error(exc: SQLAlchemyError) -> AppError:
    """Map a SQLAlchemy failure onto the store error taxonomy."""
    if isinstance(exc, (StaleDataError, IntegrityError)):
        return StoreConflictError(f"Concurrent update detected: {exc.__class__.__name__}")
    if isinstance(exc, OperationalError) and "locked" in str(exc.orig).lower():
        return StoreConflictError("Database is locked by another writer")
    return StoreUnavailableError(f"Account store error: {exc.__class__.__name__}")


class SqlAlchemyAccountStore:
    """
    AccountStore backed by a relational database.

    Each transaction() call opens its own session, commits it when the block
    exits cleanly, rolls it back on any exception and always closes it.
    A failure while committing means nothing was applied.
    """

    def __init__(self, database: Database):
        self._database = database

    @contextmanager
    def transaction(self) -> Iterator[SqlAlchemyStoreSession]:
        session = self._database.session()
        try:
            yield SqlAlchemyStoreSession(session)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            error = translate_error(exc)
            logger.debug("Store transaction rolled back: %s", exc)
            raise error from exc
        except BaseException:
            session.rollback()
            raise
        finally:
            session.close()
