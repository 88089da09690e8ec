"""Tests for scoring API endpoints."""

from __future__ import annotations

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient


THRESHOLD = {
    "industry": "Test Industry",
    "irr": 25,
    "leverage_f2_min": 2.0,
    "leverage_f2_max": 3.0,
    "ro40_min": 0.15,
    "ro40_max": 0.25,
    "cash_sdebt_min": 0.7,
    "cash_sdebt_max": 1.2,
    "current_ratio_min": 1.1,
    "current_ratio_max": 2.0,
}


def _stock(green_fundamentals: dict, **overrides) -> dict:
    return {
        "ticker": "TST",
        "company_name": "Test Corp",
        "industry": "Test Industry",
        **green_fundamentals,
        **overrides,
    }


class TestPresetsEndpoint:
    """Tests for GET /scoring/presets."""

    def test_lists_presets(self, client: TestClient):
        """Both presets are listed with the default."""
        response = client.get("/scoring/presets")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["default"] == "standard"
        assert {p["name"] for p in data["presets"]} == {"standard", "detailed"}

    def test_get_one(self, client: TestClient):
        """A single preset reports its totals."""
        response = client.get("/scoring/presets/detailed")
        data = response.json()
        assert data["total_active_points"] == 105
        assert data["orange_label"] == "BLUE"

    def test_unknown_preset(self, client: TestClient):
        """Unknown presets return a structured 404."""
        response = client.get("/scoring/presets/nope")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["error"] == "NOT_FOUND"
        assert data["details"]["available"] == ["detailed", "standard"]


class TestScoreEndpoint:
    """Tests for POST /scoring/score."""

    def test_scores_in_order(self, client: TestClient, green_fundamentals):
        """Scores are returned in request order."""
        payload = {
            "stocks": [
                {"ticker": "EMP", "company_name": "Empty"},
                _stock(green_fundamentals),
            ],
            "thresholds": [THRESHOLD],
        }
        response = client.post("/scoring/score", json=payload)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["preset"] == "standard"
        assert data["count"] == 2
        assert [s["score"] for s in data["scores"]] == [0.0, 55.0]

    def test_with_targets_and_prices(self, client: TestClient, green_fundamentals):
        """Entry/exit targets and price records reach the engine."""
        payload = {
            "stocks": [_stock(green_fundamentals, sma100=90, sma200=80, sma_cross="GOLDEN")],
            "thresholds": [THRESHOLD],
            "prices": [{"ticker": "TST", "company_name": "Test Corp", "price": 100}],
            "entry_exit": {"TST-Test Corp": {"entry1": 100, "exit1": 170}},
        }
        response = client.post("/scoring/score", json=payload)
        assert response.json()["scores"][0]["score"] == 100.0

    def test_detailed_preset(self, client: TestClient, green_fundamentals):
        """The detailed preset normalizes 105 points."""
        payload = {
            "stocks": [_stock(green_fundamentals)],
            "thresholds": [THRESHOLD],
            "preset": "detailed",
        }
        response = client.post("/scoring/score", json=payload)
        assert response.json()["scores"][0]["score"] == 52.4

    def test_empty_request_rejected(self, client: TestClient):
        """At least one stock is required."""
        response = client.post("/scoring/score", json={"stocks": []})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_batch_limit(self, client: TestClient):
        """Requests above max_batch_size are rejected."""
        stocks = [{"ticker": f"T{i}", "company_name": f"Co {i}"} for i in range(3)]
        with patch("scoreboard.api.routes.scoring.settings.max_batch_size", 2):
            response = client.post("/scoring/score", json={"stocks": stocks})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "BAD_REQUEST"


class TestBreakdownEndpoint:
    """Tests for POST /scoring/breakdown."""

    def test_breakdown(self, client: TestClient, green_fundamentals):
        """Breakdown lists every metric and agrees with the score."""
        payload = {
            "stock": _stock(green_fundamentals, ro40_f1=20),
            "thresholds": [THRESHOLD],
            "preset": "detailed",
        }
        response = client.post("/scoring/breakdown", json=payload)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["ticker"] == "TST"
        assert len(data["items"]) == 15
        ro40 = next(i for i in data["items"] if i["key"] == "ro40_f1")
        assert ro40["color"] == "BLUE"
        # (55 - 6 + 4.2) / 105
        assert data["total_score"] == 50.7


class TestColorsEndpoint:
    """Tests for POST /scoring/colors."""

    def test_colors(self, client: TestClient, green_fundamentals):
        """Every metric is labelled with the preset's labels."""
        payload = {
            "stock": _stock(green_fundamentals, sma_cross="GOLDEN"),
            "thresholds": [THRESHOLD],
        }
        response = client.post("/scoring/colors", json=payload)
        data = response.json()
        assert data["preset"] == "standard"
        assert data["colors"]["irr"] == "GREEN"
        assert data["colors"]["sma_cross"] == "GREEN"
        assert data["colors"]["theo_entry"] == "BLANK"
