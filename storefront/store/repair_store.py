"""
Repair record store.

Owns the RepairRecord schema: validates each document, assigns the id,
the initial status and the created/updated timestamps, then hands the
document to a backend. Only inserts are supported; records are never
updated or deleted through this store.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from storefront.config import AppConfig, settings
from storefront.logging_context import get_request_logger
from storefront.schemas.repair_schema import RepairRecord, RepairStatus
from storefront.store.backends import DocumentBackend, InMemoryBackend, JsonFileBackend

logger = get_request_logger(__name__)


class StoreError(Exception):
    """Base class for repair store failures."""


class RecordValidationError(StoreError):
    """A document broke the schema: missing field or out-of-set enum value."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Invalid repair record fields: {', '.join(fields)}")


class StoreUnavailableError(StoreError):
    """The underlying storage could not be reached."""


def _error_fields(exc: ValidationError) -> list[str]:
    """Collect the offending field names (by alias) from a pydantic error."""
    fields: list[str] = []
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "record"
        if name not in fields:
            fields.append(name)
    return fields


class RepairRecordStore:
    """Validating front for a repair record document collection."""

    def __init__(self, backend: Optional[DocumentBackend] = None) -> None:
        self.backend: DocumentBackend = backend if backend is not None else InMemoryBackend()

    def insert(self, record: dict) -> dict:
        """
        Validate and persist a new repair record.

        ``record`` carries the input fields keyed by their JSON names. A
        ``status`` may be supplied; otherwise it defaults to ``requested``.

        Returns:
            The stored document, including ``id``, ``status``,
            ``createdAt`` and ``updatedAt``.

        Raises:
            RecordValidationError: a required field is missing or blank, or
                an enum field holds a value outside its set.
            StoreUnavailableError: the backend could not be reached.
        """
        now = datetime.now(timezone.utc)
        document = {
            **record,
            "id": f"RR-{uuid.uuid4().hex[:8].upper()}",
            "status": record.get("status", RepairStatus.REQUESTED.value),
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            validated = RepairRecord.model_validate(document)
        except ValidationError as exc:
            fields = _error_fields(exc)
            logger.warning("Repair record rejected, invalid fields: %s", fields)
            raise RecordValidationError(fields) from exc

        stored = validated.model_dump(mode="json", by_alias=True)
        try:
            self.backend.put(stored)
        except OSError as exc:
            logger.error("Repair store unavailable during insert: %s", exc)
            raise StoreUnavailableError("Repair record storage is unavailable") from exc

        logger.info(
            "Repair record created: %s for %s (%s) on %s at %s",
            stored["id"], stored["name"], stored["repairType"], stored["date"], stored["time"],
        )
        return stored

    def get(self, record_id: str) -> Optional[dict]:
        """Retrieve a stored record by id."""
        try:
            return self.backend.get(record_id)
        except OSError as exc:
            raise StoreUnavailableError("Repair record storage is unavailable") from exc

    def all(self) -> list[dict]:
        try:
            return self.backend.all()
        except OSError as exc:
            raise StoreUnavailableError("Repair record storage is unavailable") from exc

    def count(self) -> int:
        return len(self.all())

    def reset(self) -> None:
        """Clear all records. Used by test fixtures for isolation."""
        self.backend.clear()


def build_store(config: AppConfig = settings) -> RepairRecordStore:
    """Create the store selected by configuration."""
    path = config.store.repair_store_path.strip()
    if path:
        logger.info("Using JSON file repair store at %s", path)
        return RepairRecordStore(JsonFileBackend(path))
    logger.info("Using in-memory repair store")
    return RepairRecordStore(InMemoryBackend())
