"""SQLAlchemy implementation of TransactionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.domain.models import TransactionRecord, TransactionKind
from tradesim.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction log. Records are only ever inserted."""

    def __init__(self, db: Session):
        self._db = db

    def append(self, record: TransactionRecord) -> TransactionRecord:
        """Append a record to the log."""
        orm_txn = TransactionORM(
            txn_id=record.txn_id,
            user_id=record.user_id,
            kind=record.kind,
            symbol=record.symbol,
            quantity=record.quantity,
            unit_price=record.unit_price,
            timestamp=record.timestamp,
        )
        self._db.add(orm_txn)
        self._db.flush()
        return self._to_domain(orm_txn)

    def list_by_user(
        self,
        user_id: str,
        kinds: Optional[list[TransactionKind]] = None,
        limit: Optional[int] = None,
    ) -> list[TransactionRecord]:
        """List records of a user, newest first (by insertion order)."""
        query = self._db.query(TransactionORM).filter(TransactionORM.user_id == user_id)
        if kinds:
            query = query.filter(TransactionORM.kind.in_(kinds))
        query = query.order_by(TransactionORM.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_domain(orm: TransactionORM) -> TransactionRecord:
        """Convert ORM model to domain model."""
        return TransactionRecord(
            txn_id=orm.txn_id,
            user_id=orm.user_id,
            kind=orm.kind,
            symbol=orm.symbol,
            quantity=int(orm.quantity),
            unit_price=Decimal(str(orm.unit_price)),
            timestamp=orm.timestamp,
        )
