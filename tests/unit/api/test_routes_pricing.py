"""Unit tests for the price summary route."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from venue_calendar_api.dependencies import reset_services


class TestPriceSummary:
    """Tests for GET /api/pricing/summary."""

    def test_three_nights(self, client: TestClient) -> None:
        """Should price three nights with the default fee and tax."""
        response = client.get(
            "/api/pricing/summary",
            params={"nightly_price": "100", "check_in": "2024-03-01", "check_out": "2024-03-04"},
        )

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["nights"] == 3
        assert Decimal(str(data["base_amount"])) == Decimal("300")
        assert Decimal(str(data["cleaning_fee"])) == Decimal("25")
        assert Decimal(str(data["tax_amount"])) == Decimal("32.5")
        assert Decimal(str(data["total"])) == Decimal("357.5")
        assert data["currency"] == "USD"

    def test_accepts_iso_datetimes(self, client: TestClient) -> None:
        """Should accept ISO date-times as query parameters."""
        response = client.get(
            "/api/pricing/summary",
            params={
                "nightly_price": "100",
                "check_in": "2024-03-01T15:00:00",
                "check_out": "2024-03-03T11:00:00",
            },
        )
        assert response.json()["nights"] == 2

    def test_missing_dates_price_zero(self, client: TestClient) -> None:
        """Should return an all-zero summary without dates."""
        response = client.get("/api/pricing/summary", params={"nightly_price": "100"})

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["nights"] == 0
        assert Decimal(str(data["total"])) == 0

    def test_fee_and_rate_overrides(self, client: TestClient) -> None:
        """Should apply fee and rate overrides from the query."""
        response = client.get(
            "/api/pricing/summary",
            params={
                "nightly_price": "100",
                "check_in": "2024-03-01",
                "check_out": "2024-03-04",
                "cleaning_fee": "0",
                "tax_rate": "0",
            },
        )
        assert Decimal(str(response.json()["total"])) == Decimal("300")

    def test_settings_from_environment(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should take fee and rate from the environment."""
        monkeypatch.setenv("VENUE_CALENDAR_CURRENCY", "EUR")
        monkeypatch.setenv("VENUE_CALENDAR_CLEANING_FEE", "50")
        reset_services()

        data = client.get(
            "/api/pricing/summary",
            params={"nightly_price": "100", "check_in": "2024-03-01", "check_out": "2024-03-02"},
        ).json()

        assert data["currency"] == "EUR"
        assert Decimal(str(data["cleaning_fee"])) == Decimal("50")

    def test_invalid_date(self, client: TestClient) -> None:
        """Should return a 400 ToolError naming the bad parameter."""
        response = client.get(
            "/api/pricing/summary",
            params={"nightly_price": "100", "check_in": "yesterday"},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error_code"] == "ERR_INPUT_001"
        assert data["details"] == {"check_in": "yesterday"}

    def test_negative_price_rejected(self, client: TestClient) -> None:
        """Should return 422 for a negative nightly price."""
        response = client.get("/api/pricing/summary", params={"nightly_price": "-1"})
        assert response.status_code == 422
