"""Shared test fixtures and helpers."""

from datetime import date, timedelta
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.client import BookingApiClient, ClientSession
from storefront.store import RepairRecordStore

TEST_BASE_URL = "http://storefront.test"


class UnreachableBackend:
    """Backend whose storage medium is down: every call raises ConnectionError."""

    def put(self, document: dict) -> None:
        raise ConnectionError("document store refused connection")

    def get(self, document_id: str) -> Optional[dict]:
        raise ConnectionError("document store refused connection")

    def all(self) -> list[dict]:
        raise ConnectionError("document store refused connection")

    def clear(self) -> None:
        pass


@pytest.fixture
def repair_store():
    return RepairRecordStore()


@pytest.fixture
def app(repair_store):
    return create_app(repair_store)


@pytest.fixture
def http_client(app):
    return TestClient(app)


def future_date(days: int = 7) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def make_booking(**overrides: str) -> dict[str, str]:
    """A valid booking payload (Scenario A values, with a date in the future)."""
    booking = {
        "name": "Jane",
        "contact": "555-1234",
        "address": "12 Elm St",
        "repairType": "Laptop Repair",
        "description": "Won't power on",
        "date": future_date(),
        "time": "9:00 AM - 12:00 PM",
    }
    booking.update(overrides)
    return booking


def make_record(**overrides) -> dict:
    """Store-level record input; same fields as a booking payload."""
    return make_booking(**overrides)


def asgi_api_client(app, auth_token: Optional[str] = None) -> BookingApiClient:
    """BookingApiClient that calls the FastAPI app in-process."""
    return BookingApiClient(
        ClientSession(base_url=TEST_BASE_URL, auth_token=auth_token),
        transport=httpx.ASGITransport(app=app),
    )


def mock_api_client(handler, auth_token: Optional[str] = None) -> BookingApiClient:
    """BookingApiClient whose requests are answered by ``handler``."""
    return BookingApiClient(
        ClientSession(base_url=TEST_BASE_URL, auth_token=auth_token),
        transport=httpx.MockTransport(handler),
    )
