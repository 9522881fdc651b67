"""Watchlist repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import WatchlistItem


class WatchlistRepository(Protocol):
    """Interface for watchlist data access."""

    def get(self, user_id: str, symbol: str) -> Optional[WatchlistItem]:
        """Get a watchlist entry."""
        ...

    def add(self, item: WatchlistItem) -> WatchlistItem:
        """Insert a watchlist entry."""
        ...

    def remove(self, user_id: str, symbol: str) -> bool:
        """Delete a watchlist entry; return whether it existed."""
        ...

    def list_by_user(self, user_id: str) -> list[WatchlistItem]:
        """List a user's watchlist ordered by symbol."""
        ...
