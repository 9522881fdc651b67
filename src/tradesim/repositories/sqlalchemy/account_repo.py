"""SQLAlchemy implementation of AccountRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.core.exceptions import NotFoundError, StoreConflictError
from tradesim.domain.models import Account
from tradesim.repositories.sqlalchemy.orm_models import AccountORM


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository. Commits are left to the store."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            user_id=account.user_id,
            cash_balance=account.cash_balance,
            created_at=account.created_at,
        )
        self._db.add(orm_account)
        self._db.flush()
        return self._to_domain(orm_account)

    def get(self, user_id: str) -> Optional[Account]:
        """Retrieve account by user ID."""
        orm_account = self._db.get(AccountORM, user_id)
        return self._to_domain(orm_account) if orm_account else None

    def save(self, account: Account) -> Account:
        """
        Write the cash balance of an existing account.

        The UPDATE is conditioned on the version read in this session, so a
        concurrent writer makes the flush fail instead of being overwritten.
        """
        orm_account = self._db.get(AccountORM, account.user_id)
        if orm_account is None:
            raise NotFoundError("Account", account.user_id)
        if account.version and orm_account.version != account.version:
            raise StoreConflictError(f"Account {account.user_id} changed concurrently")
        orm_account.cash_balance = account.cash_balance
        self._db.flush()
        return self._to_domain(orm_account)

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            user_id=orm.user_id,
            cash_balance=Decimal(str(orm.cash_balance)) if orm.cash_balance else Decimal("0"),
            created_at=orm.created_at,
            version=orm.version,
        )
