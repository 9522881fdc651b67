"""Unit tests for WatchlistService."""

from decimal import Decimal

import pytest

from tradesim.core.exceptions import NotFoundError, ValidationError


class TestWatchlist:
    """Tests for the per-user watchlist."""

    def test_add_is_idempotent(self, watchlist_service, funded_account):
        """
        GIVEN an empty watchlist
        WHEN I add "TCS" twice
        THEN the watchlist contains exactly one entry
        """
        watchlist_service.add("alice", "TCS", "Tata Consultancy")
        second = watchlist_service.add("alice", "tcs")

        items = watchlist_service.list_items("alice")
        assert [item.symbol for item in items] == ["TCS"]
        assert second.company_name == "Tata Consultancy"

    def test_list_is_alphabetical(self, watchlist_service, funded_account):
        for symbol in ("MSFT", "AAPL", "INFY"):
            watchlist_service.add("alice", symbol)

        assert [i.symbol for i in watchlist_service.list_items("alice")] == ["AAPL", "INFY", "MSFT"]

    def test_remove(self, watchlist_service, funded_account):
        watchlist_service.add("alice", "AAPL")

        assert watchlist_service.remove("alice", "aapl") is True
        assert watchlist_service.remove("alice", "AAPL") is False
        assert watchlist_service.list_items("alice") == []

    def test_watchlists_are_per_user(self, watchlist_service, account_factory):
        account_factory("alice")
        account_factory("bob")

        watchlist_service.add("alice", "AAPL")

        assert watchlist_service.list_items("bob") == []

    def test_add_requires_account(self, watchlist_service):
        with pytest.raises(NotFoundError):
            watchlist_service.add("nobody", "AAPL")

    def test_blank_symbol_rejected(self, watchlist_service, funded_account):
        with pytest.raises(ValidationError):
            watchlist_service.add("alice", "  ")

    def test_list_with_prices(self, watchlist_service, funded_account):
        watchlist_service.add("alice", "AAPL")
        watchlist_service.add("alice", "ZZZZ")

        entries = {e.symbol: e for e in watchlist_service.list_with_prices("alice")}

        assert entries["AAPL"].price == Decimal("185.50")
        assert entries["ZZZZ"].price is None

    def test_watchlist_does_not_touch_cash(self, watchlist_service, ledger_service, funded_account):
        watchlist_service.add("alice", "AAPL")
        watchlist_service.remove("alice", "AAPL")

        assert ledger_service.get_account("alice").cash_balance == Decimal("10000.00")
        assert len(ledger_service.list_transactions("alice")) == 1
