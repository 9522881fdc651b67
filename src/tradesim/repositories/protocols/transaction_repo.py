"""Transaction log repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import TransactionRecord, TransactionKind


class TransactionRepository(Protocol):
    """Interface for the append-only transaction log."""

    def append(self, record: TransactionRecord) -> TransactionRecord:
        """Append a record to the log."""
        ...

    def list_by_user(
        self,
        user_id: str,
        kinds: Optional[list[TransactionKind]] = None,
        limit: Optional[int] = None,
    ) -> list[TransactionRecord]:
        """List records of a user, newest first."""
        ...
