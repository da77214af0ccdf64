from storefront.schemas.repair_schema import (
    BOOKING_FIELDS,
    CategoriesResponse,
    MessageResponse,
    RepairBookingRequest,
    RepairRecord,
    RepairStatus,
)

__all__ = [
    "BOOKING_FIELDS",
    "CategoriesResponse",
    "MessageResponse",
    "RepairBookingRequest",
    "RepairRecord",
    "RepairStatus",
]
