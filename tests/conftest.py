"""
Pytest configuration and fixtures for trading simulator tests.

This module provides:
- In-memory SQLite database fixtures
- Deterministic quote sources
- Service and store fixtures
- Account factory helpers
- FastAPI test client
"""

from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from fastapi.testclient import TestClient

from tradesim.app_context import AppContext
from tradesim.config.settings import Settings, reset_settings
from tradesim.domain.models import Account
from tradesim.main import create_app
from tradesim.providers import StaticQuoteSource
from tradesim.repositories.sqlalchemy import Base, Database, SqlAlchemyAccountStore
# Import ORM models to register them with Base before creating tables
from tradesim.repositories.sqlalchemy import orm_models  # noqa: F401
from tradesim.services import (
    LedgerService,
    MarketDataService,
    ValuationService,
    WatchlistService,
)


FIXED_PRICES = {
    "AAPL": Decimal("185.50"),
    "MSFT": Decimal("378.25"),
    "TCS": Decimal("3821.50"),
    "INFY": Decimal("1445.75"),
    "XYZ": Decimal("5.00"),
}


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def database(test_engine) -> Database:
    """Provide a Database handle over the test engine."""
    return Database.from_engine(test_engine)


@pytest.fixture
def store(database) -> SqlAlchemyAccountStore:
    """Provide test AccountStore."""
    return SqlAlchemyAccountStore(database)


# =============================================================================
# QUOTE FIXTURES
# =============================================================================


@pytest.fixture
def quote_source() -> StaticQuoteSource:
    """Provide a quote source with fixed prices."""
    return StaticQuoteSource(FIXED_PRICES)


class CountingQuoteSource:
    """Quote source that records every lookup."""

    def __init__(self, prices: dict[str, Decimal]):
        self._prices = prices
        self.calls: list[str] = []

    def current_price(self, symbol: str) -> Optional[Decimal]:
        self.calls.append(symbol)
        return self._prices.get(symbol)


class FailingQuoteSource:
    """Quote source that always raises."""

    def current_price(self, symbol: str) -> Optional[Decimal]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def counting_quote_source() -> CountingQuoteSource:
    return CountingQuoteSource(dict(FIXED_PRICES))


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(store, quote_source) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(store=store, quote_source=quote_source, max_retries=3)


@pytest.fixture
def valuation_service(ledger_service, quote_source) -> ValuationService:
    """Provide test ValuationService."""
    return ValuationService(ledger_service=ledger_service, quote_source=quote_source)


@pytest.fixture
def watchlist_service(store, quote_source) -> WatchlistService:
    """Provide test WatchlistService."""
    return WatchlistService(store=store, quote_source=quote_source)


@pytest.fixture
def market_data_service(quote_source) -> MarketDataService:
    """Provide test MarketDataService."""
    return MarketDataService(quote_source)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(ledger_service) -> Callable[..., Account]:
    """Factory for opening test accounts with an optional starting deposit."""
    counter = {"n": 0}

    def _open(user_id: Optional[str] = None, cash: Optional[Decimal] = None) -> Account:
        if user_id is None:
            counter["n"] += 1
            user_id = f"user-{counter['n']}"
        account = ledger_service.open_account(user_id)
        if cash:
            account = ledger_service.deposit(user_id, cash)
        return account

    return _open


@pytest.fixture
def funded_account(account_factory) -> Account:
    """Account holding 10,000.00 in cash and no positions."""
    return account_factory("alice", cash=Decimal("10000.00"))


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for in-process tests (no background ticker)."""
    return Settings(database_url="sqlite://", price_tick_seconds=0, value_series_capacity=20)


@pytest.fixture
def app_context(test_settings, database, quote_source) -> AppContext:
    """Provide an AppContext bound to the test database."""
    return AppContext(settings=test_settings, quote_source=quote_source, database=database)


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client with test database."""
    app = create_app(context=app_context)
    with TestClient(app) as c:
        yield c
