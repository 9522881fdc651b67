"""Core utilities and shared functionality."""

from tradesim.core.timezone import now_eastern, to_eastern, EASTERN_TZ
from tradesim.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AccountExistsError,
    InvalidAmountError,
    InvalidQuantityError,
    InsufficientFundsError,
    InsufficientPositionError,
    QuoteUnavailableError,
    StoreConflictError,
    StoreUnavailableError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AccountExistsError",
    "InvalidAmountError",
    "InvalidQuantityError",
    "InsufficientFundsError",
    "InsufficientPositionError",
    "QuoteUnavailableError",
    "StoreConflictError",
    "StoreUnavailableError",
]
