"""Domain model sanity checks."""

from datetime import datetime
from decimal import Decimal

from tradesim.domain.models import (
    Account,
    Position,
    TransactionRecord,
    TransactionKind,
    OrderSide,
)


class TestDomainModels:
    """Test domain model creation."""

    def test_create_account(self):
        account = Account(user_id="alice", cash_balance=Decimal("0"))

        assert account.user_id == "alice"
        assert account.cash_balance == Decimal("0")

    def test_position_cost_basis(self):
        position = Position(user_id="alice", symbol="AAPL", quantity=10, average_cost=Decimal("185.50"))

        assert position.cost_basis == Decimal("1855.00")

    def test_buy_record_reduces_cash(self):
        """Test BUY record: -(10 * 150) = -1500"""
        record = TransactionRecord(
            txn_id="txn-1",
            user_id="alice",
            kind=TransactionKind.BUY,
            symbol="AAPL",
            quantity=10,
            unit_price=Decimal("150.00"),
            timestamp=datetime(2024, 1, 2, 10, 0),
        )

        assert record.amount == Decimal("1500.00")
        assert record.net_cash_impact == Decimal("-1500.00")

    def test_deposit_record_amount_recoverable(self):
        record = TransactionRecord(
            txn_id="txn-2",
            user_id="alice",
            kind="DEPOSIT",
            quantity=1,
            unit_price=Decimal("10000.00"),
            timestamp=datetime(2024, 1, 2, 10, 0),
        )

        assert record.kind == TransactionKind.DEPOSIT
        assert record.symbol is None
        assert record.net_cash_impact == Decimal("10000.00")

    def test_order_side_maps_to_transaction_kind(self):
        assert OrderSide.BUY.transaction_kind == TransactionKind.BUY
        assert OrderSide.SELL.transaction_kind == TransactionKind.SELL
