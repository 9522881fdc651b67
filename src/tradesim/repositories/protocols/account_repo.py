"""Account repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get(self, user_id: str) -> Optional[Account]:
        """Retrieve account by user ID."""
        ...

    def save(self, account: Account) -> Account:
        """Write the cash balance of an existing account."""
        ...
