"""Unit tests for the month grid route."""

from typing import Any

from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST


class TestGetCalendar:
    """Tests for POST /api/calendar/{month}."""

    def test_renders_42_days(
        self, client: TestClient, sample_booking_payload: list[dict[str, Any]]
    ) -> None:
        """Should render 42 days with month counts."""
        response = client.post("/api/calendar/2024-03", json={"bookings": sample_booking_payload})

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["month"] == "2024-03"
        assert len(data["days"]) == 42
        assert data["days"][0]["date"] == "2024-02-26"
        assert data["blocked_count"] == 8
        assert data["available_count"] == 23

    def test_checkout_day_is_free(
        self, client: TestClient, sample_booking_payload: list[dict[str, Any]]
    ) -> None:
        """Should leave the checkout day of a booking free."""
        response = client.post("/api/calendar/2024-03", json={"bookings": sample_booking_payload})
        by_date = {day["date"]: day for day in response.json()["days"]}

        assert by_date["2024-03-14"]["is_blocked"]
        assert not by_date["2024-03-15"]["is_blocked"]

    def test_selection_and_preview(self, client: TestClient) -> None:
        """Should flag the preview from start to hovered day."""
        response = client.post(
            "/api/calendar/2024-03",
            json={"selection": {"start": "2024-03-15"}, "hovered": "2024-03-17"},
        )

        assert response.status_code == HTTP_200_OK
        preview = [day["date"] for day in response.json()["days"] if day["is_in_preview"]]
        assert preview == ["2024-03-15", "2024-03-16", "2024-03-17"]

    def test_allow_past_override(self, client: TestClient) -> None:
        """Should unblock past days when the request allows them."""
        response = client.post("/api/calendar/2024-02", json={"allow_past": True})

        assert response.status_code == HTTP_200_OK
        assert response.json()["blocked_count"] == 0

    def test_past_month_blocked_by_default(self, client: TestClient) -> None:
        """Should block every day of a past month by default."""
        response = client.post("/api/calendar/2024-02", json={})

        assert response.json()["available_count"] == 0

    def test_invalid_month(self, client: TestClient) -> None:
        """Should return a 400 ToolError for a malformed month."""
        response = client.post("/api/calendar/2024-13", json={})

        assert response.status_code == HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "ERR_INPUT_002"
        assert data["details"] == {"month": "2024-13"}

    def test_inverted_selection_rejected(self, client: TestClient) -> None:
        """Should return 422 for an inverted selection."""
        response = client.post(
            "/api/calendar/2024-03",
            json={"selection": {"start": "2024-03-20", "end": "2024-03-15"}},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "ERR_VALIDATION"

    def test_month_past_last_date(self, client: TestClient) -> None:
        """Should return a 400 ToolError for a month whose grid passes date.max."""
        response = client.post("/api/calendar/9999-12", json={})

        assert response.status_code == HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error_code"] == "ERR_INPUT_002"
        assert data["details"] == {"month": "9999-12"}

    def test_last_month_with_full_grid(self, client: TestClient) -> None:
        """Should render November 9999, the last month whose grid fits."""
        response = client.post("/api/calendar/9999-11", json={})

        assert response.status_code == HTTP_200_OK
        assert len(response.json()["days"]) == 42
