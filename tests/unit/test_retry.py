"""
Unit tests for bounded retry of conflicting units of work.

Tests cover:
- Conflicts within the attempt limit are retried and succeed
- Exhausted retries surface StoreConflictError
- Non-conflict errors are never retried
- Orders reuse their quote across retries
"""

from contextlib import contextmanager
from decimal import Decimal

import pytest

from tradesim.core.exceptions import StoreConflictError, InsufficientFundsError
from tradesim.domain.models import OrderSide, TransactionKind
from tradesim.services import LedgerService
from tradesim.services.retry import run_in_transaction


class ConflictingStore:
    """Store wrapper whose first N transactions fail at commit with a conflict."""

    def __init__(self, inner, conflicts: int):
        self._inner = inner
        self.remaining = conflicts
        self.attempts = 0

    @contextmanager
    def transaction(self):
        self.attempts += 1
        with self._inner.transaction() as uow:
            yield uow
            if self.remaining > 0:
                self.remaining -= 1
                raise StoreConflictError("simulated concurrent update")


class TestRunInTransaction:
    """Tests for run_in_transaction."""

    def test_success_on_first_attempt(self, store):
        store_wrapper = ConflictingStore(store, conflicts=0)

        result = run_in_transaction(store_wrapper, lambda uow: "done", max_attempts=3)

        assert result == "done"
        assert store_wrapper.attempts == 1

    def test_conflicts_are_retried(self, store):
        """
        GIVEN a store that conflicts twice
        WHEN I run work with 3 attempts
        THEN the third attempt succeeds
        """
        store_wrapper = ConflictingStore(store, conflicts=2)

        result = run_in_transaction(store_wrapper, lambda uow: 42, max_attempts=3)

        assert result == 42
        assert store_wrapper.attempts == 3

    def test_exhausted_retries_raise_conflict(self, store):
        store_wrapper = ConflictingStore(store, conflicts=5)

        with pytest.raises(StoreConflictError):
            run_in_transaction(store_wrapper, lambda uow: None, max_attempts=3)

        assert store_wrapper.attempts == 3

    def test_other_errors_are_not_retried(self, store):
        store_wrapper = ConflictingStore(store, conflicts=0)

        def work(uow):
            raise InsufficientFundsError("10", "5")

        with pytest.raises(InsufficientFundsError):
            run_in_transaction(store_wrapper, work, max_attempts=3)

        assert store_wrapper.attempts == 1

    def test_retry_logs_warning(self, store, caplog):
        store_wrapper = ConflictingStore(store, conflicts=1)

        with caplog.at_level("WARNING", logger="tradesim.services.retry"):
            run_in_transaction(store_wrapper, lambda uow: None, max_attempts=2, description="deposit alice")

        assert "deposit alice: write conflict on attempt 1/2" in caplog.text


class TestLedgerRetry:
    """Order settlement under write conflicts."""

    def test_order_retried_with_single_quote_lookup(self, store, counting_quote_source):
        """
        GIVEN a funded account and a store that conflicts twice
        WHEN I place a BUY order without a price
        THEN it settles exactly once and the quote was read once
        """
        setup = LedgerService(store=store, quote_source=counting_quote_source)
        setup.open_account("alice")
        setup.deposit("alice", Decimal("100"))

        ledger = LedgerService(
            store=ConflictingStore(store, conflicts=2),
            quote_source=counting_quote_source,
            max_retries=3,
        )
        result = ledger.place_order("alice", "XYZ", 4, OrderSide.BUY)

        assert counting_quote_source.calls == ["XYZ"]
        assert result.account.cash_balance == Decimal("80")
        assert setup.get_account("alice").cash_balance == Decimal("80")
        buys = setup.list_transactions("alice", kinds=[TransactionKind.BUY])
        assert len(buys) == 1

    def test_order_fails_when_conflicts_persist(self, store, quote_source):
        setup = LedgerService(store=store, quote_source=quote_source)
        setup.open_account("alice")
        setup.deposit("alice", Decimal("100"))

        ledger = LedgerService(
            store=ConflictingStore(store, conflicts=10),
            quote_source=quote_source,
            max_retries=3,
        )

        with pytest.raises(StoreConflictError):
            ledger.place_order("alice", "XYZ", 4, OrderSide.BUY)

        assert setup.get_account("alice").cash_balance == Decimal("100")
        assert setup.list_positions("alice") == []
