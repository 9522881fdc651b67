"""SQLAlchemy implementation of PositionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.domain.models import Position
from tradesim.repositories.sqlalchemy.orm_models import PositionORM


class SqlAlchemyPositionRepository:
    """SQLAlchemy-backed position repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, user_id: str, symbol: str) -> Optional[Position]:
        """Get the position for a specific symbol."""
        orm_pos = self._db.get(PositionORM, (user_id, symbol))
        return self._to_domain(orm_pos) if orm_pos else None

    def list_by_user(self, user_id: str) -> list[Position]:
        """List all positions of a user, ordered by symbol."""
        orm_positions = (
            self._db.query(PositionORM)
            .filter(PositionORM.user_id == user_id)
            .order_by(PositionORM.symbol)
            .all()
        )
        return [self._to_domain(p) for p in orm_positions]

    def save(self, position: Position) -> Position:
        """Insert or update a position."""
        orm_pos = self._db.get(PositionORM, (position.user_id, position.symbol))

        if orm_pos:
            orm_pos.quantity = position.quantity
            orm_pos.average_cost = position.average_cost
            if position.company_name and not orm_pos.company_name:
                orm_pos.company_name = position.company_name
        else:
            orm_pos = PositionORM(
                user_id=position.user_id,
                symbol=position.symbol,
                company_name=position.company_name,
                quantity=position.quantity,
                average_cost=position.average_cost,
            )
            self._db.add(orm_pos)

        self._db.flush()
        return self._to_domain(orm_pos)

    def delete(self, user_id: str, symbol: str) -> None:
        """Remove a position row (version-checked like an update)."""
        orm_pos = self._db.get(PositionORM, (user_id, symbol))
        if orm_pos is not None:
            self._db.delete(orm_pos)
            self._db.flush()

    @staticmethod
    def _to_domain(orm: PositionORM) -> Position:
        """Convert ORM position to domain model."""
        return Position(
            user_id=orm.user_id,
            symbol=orm.symbol,
            quantity=int(orm.quantity),
            average_cost=Decimal(str(orm.average_cost)),
            company_name=orm.company_name,
            version=orm.version,
        )
