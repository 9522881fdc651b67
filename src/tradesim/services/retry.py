"""Bounded retry of store units of work."""

import logging
from typing import Callable, TypeVar

from tradesim.core.exceptions import StoreConflictError
from tradesim.repositories.protocols import AccountStore, StoreSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_in_transaction(
    store: AccountStore,
    work: Callable[[StoreSession], T],
    max_attempts: int,
    description: str = "unit of work",
) -> T:
    """
    Run work inside a fresh store transaction, retrying on write conflicts.

    Every attempt re-reads its state in a new transaction. Only
    StoreConflictError is retried; any other exception propagates on the
    first occurrence with the transaction rolled back.
    """
    attempt = 1
    while True:
        try:
            with store.transaction() as uow:
                return work(uow)
        except StoreConflictError:
            if attempt >= max_attempts:
                logger.error("%s: giving up after %d conflicting attempts", description, attempt)
                raise
            logger.warning("%s: write conflict on attempt %d/%d, retrying", description, attempt, max_attempts)
            attempt += 1
