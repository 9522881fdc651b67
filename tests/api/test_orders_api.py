"""API tests for order placement."""

from decimal import Decimal

import pytest


@pytest.fixture
def funded(client):
    client.post("/accounts", json={"user_id": "alice"})
    client.post("/accounts/alice/deposits", json={"amount": "1000"})
    return "alice"


class TestOrdersAPI:
    """Tests for POST /accounts/{user_id}/orders."""

    def test_buy_order(self, client, funded):
        """
        GIVEN 1000 in cash and XYZ quoted at 5.00
        WHEN I BUY 10 xyz
        THEN the order settles and the response carries account, position and record
        """
        response = client.post(
            "/accounts/alice/orders",
            json={"symbol": "xyz", "quantity": 10, "side": "BUY", "company_name": "XYZ Corp"},
        )

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["account"]["cash_balance"]) == Decimal("950")
        assert data["position"]["symbol"] == "XYZ"
        assert data["position"]["quantity"] == 10
        assert Decimal(data["position"]["average_cost"]) == Decimal("5")
        assert data["position"]["company_name"] == "XYZ Corp"
        assert data["position_closed"] is False
        assert data["transaction"]["kind"] == "BUY"

    def test_sell_down_closes_position(self, client, funded):
        client.post("/accounts/alice/orders", json={"symbol": "XYZ", "quantity": 10, "side": "BUY"})

        response = client.post("/accounts/alice/orders", json={"symbol": "XYZ", "quantity": 10, "side": "SELL"})

        assert response.status_code == 201
        data = response.json()
        assert data["position"] is None
        assert data["position_closed"] is True
        assert Decimal(data["account"]["cash_balance"]) == Decimal("1000")

    def test_insufficient_funds(self, client, funded):
        response = client.post("/accounts/alice/orders", json={"symbol": "TCS", "quantity": 1, "side": "BUY"})

        assert response.status_code == 422
        assert response.json()["error"] == "INSUFFICIENT_FUNDS"
        assert Decimal(client.get("/accounts/alice").json()["cash_balance"]) == Decimal("1000")

    def test_insufficient_position(self, client, funded):
        response = client.post("/accounts/alice/orders", json={"symbol": "AAPL", "quantity": 1, "side": "SELL"})

        assert response.status_code == 422
        assert response.json()["error"] == "INSUFFICIENT_POSITION"

    def test_unquoted_symbol(self, client, funded):
        response = client.post("/accounts/alice/orders", json={"symbol": "NOPE", "quantity": 1, "side": "BUY"})

        assert response.status_code == 503
        assert response.json()["error"] == "QUOTE_UNAVAILABLE"

    @pytest.mark.parametrize(
        "payload",
        [
            {"symbol": "XYZ", "quantity": 0, "side": "BUY"},
            {"symbol": "XYZ", "quantity": 1, "side": "HOLD"},
            {"symbol": "", "quantity": 1, "side": "BUY"},
        ],
    )
    def test_malformed_order_rejected(self, client, funded, payload):
        response = client.post("/accounts/alice/orders", json=payload)

        assert response.status_code == 422

    def test_order_for_unknown_account(self, client):
        response = client.post("/accounts/nobody/orders", json={"symbol": "XYZ", "quantity": 1, "side": "BUY"})

        assert response.status_code == 404

    def test_order_samples_portfolio_value(self, client, funded):
        client.post("/accounts/alice/orders", json={"symbol": "XYZ", "quantity": 10, "side": "BUY"})

        series = client.get("/accounts/alice/portfolio/value-series").json()

        assert len(series["samples"]) == 1
        assert Decimal(series["samples"][0]["value"]) == Decimal("50")
