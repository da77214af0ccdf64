"""Tests for the booking API endpoint."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from storefront.api import (
    BOOKING_CONFIRMED_MESSAGE,
    BOOKING_FAILED_MESSAGE,
    check_booking,
    create_app,
    find_missing_fields,
)
from storefront.schemas import RepairBookingRequest
from storefront.store import RepairRecordStore
from tests.conftest import UnreachableBackend, make_booking


class TestScheduleRepair:
    def test_valid_booking_persists_record(self, http_client, repair_store):
        response = http_client.post("/repairs/schedule", json=make_booking())

        assert response.status_code == 200
        assert response.json() == {"message": BOOKING_CONFIRMED_MESSAGE}
        records = repair_store.all()
        assert len(records) == 1
        assert records[0]["status"] == "requested"
        assert records[0]["contact"] == "555-1234"

    def test_missing_contact_rejected(self, http_client, repair_store):
        response = http_client.post("/repairs/schedule", json=make_booking(contact=""))

        assert response.status_code == 400
        assert response.json() == {"message": "Missing required fields: contact."}
        assert repair_store.count() == 0

    def test_absent_key_rejected(self, http_client, repair_store):
        booking = make_booking()
        del booking["time"]
        response = http_client.post("/repairs/schedule", json=booking)

        assert response.status_code == 400
        assert "time" in response.json()["message"]
        assert repair_store.count() == 0

    def test_all_missing_fields_listed(self, http_client):
        response = http_client.post("/repairs/schedule", json={})
        assert response.status_code == 400
        assert response.json()["message"] == (
            "Missing required fields: name, contact, address, repairType, description, date, time."
        )

    def test_whitespace_only_counts_as_missing(self, http_client):
        response = http_client.post("/repairs/schedule", json=make_booking(name="   "))
        assert response.status_code == 400
        assert "name" in response.json()["message"]

    @pytest.mark.parametrize("field_name", ["name", "contact", "address", "repairType", "description", "date", "time"])
    def test_each_required_field(self, http_client, repair_store, field_name):
        response = http_client.post("/repairs/schedule", json=make_booking(**{field_name: ""}))
        assert response.status_code == 400
        assert field_name in response.json()["message"]
        assert repair_store.count() == 0

    def test_past_date_rejected(self, http_client, repair_store):
        yesterday = (date.today() - timedelta(days=1)).isoformat()
        response = http_client.post("/repairs/schedule", json=make_booking(date=yesterday))

        assert response.status_code == 400
        assert "past" in response.json()["message"]
        assert repair_store.count() == 0

    def test_today_accepted(self, http_client):
        response = http_client.post(
            "/repairs/schedule", json=make_booking(date=date.today().isoformat())
        )
        assert response.status_code == 200

    def test_unparseable_date_rejected(self, http_client):
        response = http_client.post("/repairs/schedule", json=make_booking(date="10/01/2025"))
        assert response.status_code == 400
        assert "YYYY-MM-DD" in response.json()["message"]

    def test_unpadded_date_rejected(self, http_client, repair_store):
        response = http_client.post("/repairs/schedule", json=make_booking(date="2099-1-5"))
        assert response.status_code == 400
        assert "YYYY-MM-DD" in response.json()["message"]
        assert repair_store.count() == 0

    def test_stored_date_is_canonical(self, http_client, repair_store):
        booking_date = date.today() + timedelta(days=30)
        response = http_client.post(
            "/repairs/schedule", json=make_booking(date=f"  {booking_date.isoformat()} ")
        )
        assert response.status_code == 200
        assert repair_store.all()[0]["date"] == booking_date.isoformat()

    def test_unknown_time_slot_rejected(self, http_client):
        response = http_client.post("/repairs/schedule", json=make_booking(time="10:00"))
        assert response.status_code == 400
        assert "time slot" in response.json()["message"]

    def test_unknown_repair_type_rejected(self, http_client):
        response = http_client.post("/repairs/schedule", json=make_booking(repairType="Lawn Mowing"))
        assert response.status_code == 400
        assert "Lawn Mowing" in response.json()["message"]

    def test_duplicate_submissions_create_two_records(self, http_client, repair_store):
        booking = make_booking()
        assert http_client.post("/repairs/schedule", json=booking).status_code == 200
        assert http_client.post("/repairs/schedule", json=booking).status_code == 200

        records = repair_store.all()
        assert len(records) == 2
        assert records[0]["id"] != records[1]["id"]

    def test_values_are_trimmed(self, http_client, repair_store):
        http_client.post("/repairs/schedule", json=make_booking(name="  Jane  "))
        assert repair_store.all()[0]["name"] == "Jane"

    def test_extra_fields_ignored(self, http_client, repair_store):
        response = http_client.post(
            "/repairs/schedule", json=make_booking(status="completed", id="RR-FORGED")
        )
        assert response.status_code == 200
        record = repair_store.all()[0]
        assert record["status"] == "requested"
        assert record["id"] != "RR-FORGED"


class TestMalformedBodies:
    def test_invalid_json(self, http_client):
        response = http_client.post(
            "/repairs/schedule",
            content="name=Jane",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body."}

    def test_json_array(self, http_client):
        response = http_client.post("/repairs/schedule", json=[make_booking()])
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body."}


class TestStoreFailure:
    def test_unreachable_store_returns_generic_500(self):
        client = TestClient(create_app(RepairRecordStore(UnreachableBackend())))
        response = client.post("/repairs/schedule", json=make_booking())

        assert response.status_code == 500
        assert response.json() == {"message": BOOKING_FAILED_MESSAGE}
        assert "refused" not in response.text
        assert "Connection" not in response.text

    def test_store_schema_failure_returns_generic_500(self, repair_store, monkeypatch):
        from storefront.store import RecordValidationError

        def reject(record):
            raise RecordValidationError(["status"])

        monkeypatch.setattr(repair_store, "insert", reject)
        client = TestClient(create_app(repair_store))
        response = client.post("/repairs/schedule", json=make_booking())

        assert response.status_code == 500
        assert response.json() == {"message": BOOKING_FAILED_MESSAGE}

    def test_unhandled_error_keeps_request_id(self, repair_store, monkeypatch):
        def crash(record):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(repair_store, "insert", crash)
        client = TestClient(create_app(repair_store), raise_server_exceptions=False)
        response = client.post(
            "/repairs/schedule", json=make_booking(), headers={"X-Request-ID": "REQ-crash-1"}
        )

        assert response.status_code == 500
        assert response.json() == {"message": BOOKING_FAILED_MESSAGE}
        assert response.headers["X-Request-ID"] == "REQ-crash-1"
        assert "fire" not in response.text

    def test_unhandled_error_gets_generated_request_id(self, repair_store, monkeypatch):
        def crash(record):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(repair_store, "insert", crash)
        client = TestClient(create_app(repair_store), raise_server_exceptions=False)
        response = client.post("/repairs/schedule", json=make_booking())

        assert response.status_code == 500
        assert response.headers["X-Request-ID"].startswith("REQ-")


class TestSupportRoutes:
    def test_categories(self, http_client):
        response = http_client.get("/repairs/categories")
        assert response.status_code == 200
        body = response.json()
        assert "Laptop Repair" in body["categories"]
        assert body["timeSlots"][0] == "9:00 AM - 12:00 PM"
        assert body["business"]

    def test_health(self, http_client):
        response = http_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_request_id_generated(self, http_client):
        response = http_client.get("/health")
        assert response.headers["X-Request-ID"].startswith("REQ-")

    def test_request_id_echoed(self, http_client):
        response = http_client.post(
            "/repairs/schedule", json=make_booking(), headers={"X-Request-ID": "REQ-from-client"}
        )
        assert response.headers["X-Request-ID"] == "REQ-from-client"


class TestValidationHelpers:
    def test_find_missing_fields_none(self):
        assert find_missing_fields(make_booking()) == []

    def test_find_missing_fields_non_string(self):
        assert find_missing_fields(make_booking(name=123)) == ["name"]

    def test_check_booking_accepts_valid(self):
        booking = RepairBookingRequest.model_validate(make_booking())
        assert check_booking(booking, today=date.today()) is None

    def test_check_booking_relative_to_given_day(self):
        booking = RepairBookingRequest.model_validate(make_booking(date="2025-01-10"))
        assert check_booking(booking, today=date(2025, 1, 10)) is None
        assert check_booking(booking, today=date(2025, 1, 11)) == "The repair date cannot be in the past."
