from storefront.store.backends import DocumentBackend, InMemoryBackend, JsonFileBackend
from storefront.store.repair_store import (
    RecordValidationError,
    RepairRecordStore,
    StoreError,
    StoreUnavailableError,
    build_store,
)

__all__ = [
    "DocumentBackend",
    "InMemoryBackend",
    "JsonFileBackend",
    "RecordValidationError",
    "RepairRecordStore",
    "StoreError",
    "StoreUnavailableError",
    "build_store",
]
