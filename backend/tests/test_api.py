"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from tradebot.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"

    def test_cors_allows_configured_origin(self, client):
        response = client.get("/health", headers={"Origin": "http://localhost:3000"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_cors_rejects_unlisted_origin(self, client):
        response = client.get("/health", headers={"Origin": "http://localhost:3001"})
        assert "access-control-allow-origin" not in response.headers


class TestAnalyzeEndpoint:

    def test_analyze(self, client, breakout_up_prices):
        response = client.post(
            "/api/v1/signals/analyze",
            json={"prices": breakout_up_prices, "volumes": [1000.0] * 60},
        )
        assert response.status_code == 200

        body = response.json()
        assert body["signal"]["direction"] == "SELL"
        assert 0 <= body["signal"]["confidence"] <= 100
        assert body["risk"]["risk_level"] in ("LOW", "MEDIUM", "HIGH")
        assert body["data_points"] == 60
        assert body["current_price"] == 120.0

    def test_short_series(self, client):
        response = client.post("/api/v1/signals/analyze", json={"prices": [100.0] * 10})
        assert response.status_code == 200

        signal = response.json()["signal"]
        assert signal["direction"] == "HOLD"
        assert signal["confidence"] == 0
        assert signal["indicators"]["rsi"] is None
        assert signal["indicators"]["macd"] is None

    def test_empty_series(self, client):
        response = client.post("/api/v1/signals/analyze", json={"prices": []})
        assert response.status_code == 200
        assert response.json()["risk"] == {
            "risk_level": "HIGH",
            "volatility": 0.0,
            "recommendation": "Unable to assess risk. Exercise maximum caution.",
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"prices": [100.0, -1.0]},
            {"prices": [100.0, 0.0]},
            {"prices": [100.0, 101.0], "volumes": [1.0]},
            {"prices": [100.0, 101.0], "volumes": [1.0, -2.0]},
            {"volumes": [1.0]},
        ],
    )
    def test_invalid_body(self, client, body):
        response = client.post("/api/v1/signals/analyze", json=body)
        assert response.status_code == 422


class TestComponentEndpoints:

    def test_signal(self, client, breakout_down_prices):
        response = client.post(
            "/api/v1/signals/signal", json={"prices": breakout_down_prices}
        )
        assert response.status_code == 200
        assert response.json()["direction"] == "BUY"

    def test_risk(self, client, constant_prices):
        response = client.post("/api/v1/signals/risk", json={"prices": constant_prices})
        assert response.status_code == 200

        body = response.json()
        # HOLD at 50% escalates LOW to MEDIUM
        assert body["risk_level"] == "MEDIUM"
        assert body["volatility"] == 0.0
        assert body["recommendation"].endswith(
            "Low signal confidence suggests increased caution."
        )
