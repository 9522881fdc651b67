"""API tests for watchlist and market board endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient

from tradesim.app_context import AppContext
from tradesim.main import create_app
from tradesim.providers import SimulatedQuoteSource


class TestWatchlistAPI:
    """Tests for /accounts/{user_id}/watchlist."""

    def test_add_is_idempotent(self, client):
        client.post("/accounts", json={"user_id": "alice"})

        first = client.put("/accounts/alice/watchlist/aapl", json={"company_name": "Apple Inc."})
        second = client.put("/accounts/alice/watchlist/AAPL")

        assert first.status_code == 200
        assert second.status_code == 200
        data = client.get("/accounts/alice/watchlist").json()
        assert data["count"] == 1
        entry = data["entries"][0]
        assert entry["symbol"] == "AAPL"
        assert entry["company_name"] == "Apple Inc."
        assert Decimal(entry["price"]) == Decimal("185.50")

    def test_remove(self, client):
        client.post("/accounts", json={"user_id": "alice"})
        client.put("/accounts/alice/watchlist/MSFT")

        assert client.delete("/accounts/alice/watchlist/MSFT").status_code == 204
        assert client.delete("/accounts/alice/watchlist/MSFT").status_code == 204
        assert client.get("/accounts/alice/watchlist").json()["count"] == 0

    def test_add_for_unknown_account(self, client):
        response = client.put("/accounts/nobody/watchlist/AAPL")

        assert response.status_code == 404


class TestMarketAPI:
    """Tests for /market."""

    def test_static_source_has_no_board(self, client):
        response = client.get("/market")

        assert response.status_code == 200
        assert response.json() == []

    def test_simulated_board(self, test_settings, database):
        context = AppContext(
            settings=test_settings,
            quote_source=SimulatedQuoteSource(seed=1),
            database=database,
        )
        with TestClient(create_app(context=context)) as client:
            board = client.get("/market").json()
            client.post("/accounts", json={"user_id": "alice"})
            client.put("/accounts/alice/watchlist/INFY")
            watched = client.get("/accounts/alice/watchlist").json()

        assert [row["symbol"] for row in board] == ["TCS", "INFY", "HDFC", "RELI", "WIPR"]
        assert Decimal(board[0]["price"]) == Decimal("3821.50")
        assert watched["entries"][0]["company_name"] == "Infosys Ltd"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
