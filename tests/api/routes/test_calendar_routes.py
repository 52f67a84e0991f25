"""Testes da rota de estatísticas (/api/calendar/stats)."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient
from google.auth.exceptions import TransportError

from app.infra.stores.memory_stores import MemoryEventStore, MemoryTokenStore
from tests.fakes.fake_calendar_service import FakeCalendarService, timed_event
from tests.fakes.fake_oauth_provider import make_tokens
from utils.errors import AuthenticationExpiredError, CalendarFetchError

EMAIL = "ana@example.com"
STATS_URL = "/api/calendar/stats"
VALID_QUERY = {"startDate": "2024-01-01T00:00:00Z", "endDate": "2024-01-31T23:59:59Z"}


@pytest.fixture
def calendar_service() -> FakeCalendarService:
    return FakeCalendarService(
        items=[
            timed_event("a", "2024-01-02T09:00:00Z", "2024-01-02T10:30:00Z"),
            timed_event(
                "b",
                "2024-01-02T14:00:00Z",
                "2024-01-02T15:00:00Z",
                attendees=[{"email": "bia@example.com"}],
            ),
        ]
    )


@pytest.fixture
def logged_in(token_store: MemoryTokenStore) -> None:
    asyncio.run(token_store.save(EMAIL, make_tokens()))


def test_stats_requires_session(client: TestClient) -> None:
    response = client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 401
    assert response.json()["error"] == "Authentication required. Please login."


@pytest.mark.usefixtures("logged_in")
def test_stats_success(authed_client: TestClient) -> None:
    response = authed_client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] == {
        "totalEvents": 2,
        "averageDuration": 4_500_000.0,
        "averageDurationFormatted": "1 hour 15 minutes",
        "soloMeetings": 1,
        "guestMeetings": 1,
        "busiestDay": {"day": "Tuesday", "count": 2},
        "totalDuration": 9_000_000,
        "totalDurationFormatted": "2 hours 30 minutes",
    }
    assert body["meta"] == {
        "dateRange": {"start": VALID_QUERY["startDate"], "end": VALID_QUERY["endDate"]},
        "eventsProcessed": 2,
        "eventsSavedToDb": 2,
    }


@pytest.mark.parametrize(
    ("params", "message"),
    [
        ({}, "startDate and endDate query parameters are required"),
        ({"startDate": "2024-01-01"}, "startDate and endDate query parameters are required"),
        (
            {"startDate": "ontem", "endDate": "2024-01-01"},
            "Invalid date format. Use ISO 8601 format (e.g., 2024-01-01T00:00:00Z)",
        ),
        (
            {"startDate": "2024-02-01T00:00:00Z", "endDate": "2024-01-01T00:00:00Z"},
            "startDate must be before endDate",
        ),
        (
            {"startDate": "2022-01-01T00:00:00Z", "endDate": "2024-01-01T00:00:00Z"},
            "Date range cannot exceed 365 days",
        ),
    ],
)
@pytest.mark.usefixtures("logged_in")
def test_stats_validation_errors(
    authed_client: TestClient,
    calendar_service: FakeCalendarService,
    params: dict[str, str],
    message: str,
) -> None:
    response = authed_client.get(STATS_URL, params=params)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": message}
    assert calendar_service.calls == []


def test_stats_without_google_tokens(authed_client: TestClient) -> None:
    response = authed_client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "User not authenticated. Please login again.",
    }


@pytest.mark.usefixtures("logged_in")
def test_stats_when_google_rejects_credentials(
    authed_client: TestClient,
    calendar_service: FakeCalendarService,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        calendar_service,
        "_error",
        AuthenticationExpiredError("Authentication expired. Please login again."),
    )

    response = authed_client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 401
    assert response.json()["error"] == "Authentication expired. Please login again."


@pytest.mark.usefixtures("logged_in")
def test_stats_when_calendar_fetch_fails(
    authed_client: TestClient,
    calendar_service: FakeCalendarService,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        calendar_service,
        "_error",
        CalendarFetchError("Failed to fetch calendar events: quota"),
    )

    response = authed_client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to fetch calendar events: quota",
    }


@pytest.mark.usefixtures("logged_in")
def test_stats_survive_event_store_failure(
    authed_client: TestClient,
    event_store: MemoryEventStore,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def _fail(email, events):  # type: ignore[no-untyped-def]
        raise TransportError("adc refresh failed")

    monkeypatch.setattr(event_store, "save_events", _fail)

    response = authed_client.get(STATS_URL, params=VALID_QUERY)

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["totalEvents"] == 2
    assert body["meta"]["eventsSavedToDb"] == 0
