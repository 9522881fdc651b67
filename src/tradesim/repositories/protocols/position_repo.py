"""Position repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import Position


class PositionRepository(Protocol):
    """Interface for position data access."""

    def get(self, user_id: str, symbol: str) -> Optional[Position]:
        """Get the position for a specific symbol."""
        ...

    def list_by_user(self, user_id: str) -> list[Position]:
        """List all positions of a user, ordered by symbol."""
        ...

    def save(self, position: Position) -> Position:
        """Insert or update a position."""
        ...

    def delete(self, user_id: str, symbol: str) -> None:
        """Remove a position row."""
        ...
