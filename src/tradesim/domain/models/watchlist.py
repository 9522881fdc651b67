"""Watchlist domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class WatchlistItem:
    """A symbol a user is watching. No quantity or cost semantics."""

    user_id: str
    symbol: str
    company_name: Optional[str] = None
    added_at: Optional[datetime] = field(default=None)
