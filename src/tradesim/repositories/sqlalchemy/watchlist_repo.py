"""SQLAlchemy implementation of WatchlistRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from tradesim.domain.models import WatchlistItem
from tradesim.repositories.sqlalchemy.orm_models import WatchlistORM


class SqlAlchemyWatchlistRepository:
    """SQLAlchemy-backed watchlist repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, user_id: str, symbol: str) -> Optional[WatchlistItem]:
        orm_item = self._db.get(WatchlistORM, (user_id, symbol))
        return self._to_domain(orm_item) if orm_item else None

    def add(self, item: WatchlistItem) -> WatchlistItem:
        orm_item = WatchlistORM(
            user_id=item.user_id,
            symbol=item.symbol,
            company_name=item.company_name,
            added_at=item.added_at,
        )
        self._db.add(orm_item)
        self._db.flush()
        return self._to_domain(orm_item)

    def remove(self, user_id: str, symbol: str) -> bool:
        deleted = (
            self._db.query(WatchlistORM)
            .filter(WatchlistORM.user_id == user_id, WatchlistORM.symbol == symbol)
            .delete()
        )
        return deleted > 0

    def list_by_user(self, user_id: str) -> list[WatchlistItem]:
        orm_items = (
            self._db.query(WatchlistORM)
            .filter(WatchlistORM.user_id == user_id)
            .order_by(WatchlistORM.symbol)
            .all()
        )
        return [self._to_domain(i) for i in orm_items]

    @staticmethod
    def _to_domain(orm: WatchlistORM) -> WatchlistItem:
        return WatchlistItem(
            user_id=orm.user_id,
            symbol=orm.symbol,
            company_name=orm.company_name,
            added_at=orm.added_at,
        )
