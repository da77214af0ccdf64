"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_repair_schema(self):
        from storefront.schemas import BOOKING_FIELDS, RepairRecord, RepairStatus
        assert RepairStatus.REQUESTED == "requested"
        assert len(BOOKING_FIELDS) == 7
        assert RepairRecord is not None

    def test_status_set(self):
        from storefront.schemas import RepairStatus
        assert {s.value for s in RepairStatus} == {"requested", "scheduled", "completed", "cancelled"}


class TestStoreImports:
    def test_import_store(self):
        from storefront.store import (
            RecordValidationError, RepairRecordStore, StoreError, StoreUnavailableError,
        )
        assert issubclass(RecordValidationError, StoreError)
        assert issubclass(StoreUnavailableError, StoreError)
        assert RepairRecordStore().count() == 0


class TestApiImports:
    def test_create_app(self):
        from storefront.api import create_app
        from storefront.store import RepairRecordStore

        app = create_app(RepairRecordStore())
        paths = set(app.openapi()["paths"])
        assert "/repairs/schedule" in paths
        assert "/repairs/categories" in paths
        assert "/health" in paths


class TestClientImports:
    def test_import_client(self):
        from storefront.client import BookingForm, BookingFormState, ClientSession, NavigationContext
        assert BookingFormState().is_empty()
        assert NavigationContext().repair_type is None
        assert BookingForm is not None
        assert ClientSession(base_url="http://x.test").auth_token is None


class TestEntryPoints:
    def test_import_console_booking(self):
        import console_booking
        assert set(console_booking.ConsoleBooking.scenarios()) == {"booking", "missing-contact"}

    def test_import_main(self):
        import main
        assert callable(main._run_server)
