"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Account:
    """
    Cash account of a single user.

    Created with a zero balance and mutated only by deposits and order
    settlement. The balance never goes negative.
    """

    user_id: str
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    created_at: Optional[datetime] = field(default=None)
    version: int = 0
