"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

import pytz
from sqlalchemy import (
    Column,
    String,
    DateTime,
    TypeDecorator,
    Integer,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from tradesim.repositories.sqlalchemy.database import Base
from tradesim.core.timezone import to_eastern
from tradesim.domain.models.enums import TransactionKind


class EasternDateTime(TypeDecorator):
    """
    Timezone-aware datetime stored as naive UTC.

    Values are written in UTC so stored instants stay unambiguous across
    daylight-saving changes, and are read back as US/Eastern.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return to_eastern(value).astimezone(pytz.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_eastern(pytz.utc.localize(value))


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    user_id = Column(String(64), primary_key=True)
    cash_balance = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    created_at = Column(EasternDateTime, nullable=False)
    # Optimistic concurrency: every UPDATE/DELETE checks and bumps this
    version = Column(Integer, nullable=False)

    positions = relationship("PositionORM", back_populates="account")

    __mapper_args__ = {"version_id_col": version}


class PositionORM(Base):
    """SQLAlchemy model for Position (one row per user and symbol)."""

    __tablename__ = "positions"

    user_id = Column(String(64), ForeignKey("accounts.user_id"), primary_key=True)
    symbol = Column(String(20), primary_key=True)
    company_name = Column(String(255), nullable=True)
    quantity = Column(Integer, nullable=False)
    average_cost = Column(Numeric(precision=18, scale=6), nullable=False)
    version = Column(Integer, nullable=False)

    account = relationship("AccountORM", back_populates="positions")

    __mapper_args__ = {"version_id_col": version}


class TransactionORM(Base):
    """SQLAlchemy model for TransactionRecord (append-only log)."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    txn_id = Column(String(36), unique=True, nullable=False)
    user_id = Column(String(64), ForeignKey("accounts.user_id"), nullable=False, index=True)
    kind = Column(SqlEnum(TransactionKind), nullable=False)
    symbol = Column(String(20), nullable=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(precision=18, scale=6), nullable=False)
    timestamp = Column(EasternDateTime, nullable=False)


class WatchlistORM(Base):
    """SQLAlchemy model for WatchlistItem."""

    __tablename__ = "watchlist"

    user_id = Column(String(64), ForeignKey("accounts.user_id"), primary_key=True)
    symbol = Column(String(20), primary_key=True)
    company_name = Column(String(255), nullable=True)
    added_at = Column(EasternDateTime, nullable=False)
