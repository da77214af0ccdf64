from storefront.api.app import create_app
from storefront.api.repairs import (
    BOOKING_CONFIRMED_MESSAGE,
    BOOKING_FAILED_MESSAGE,
    check_booking,
    find_missing_fields,
)

__all__ = [
    "create_app",
    "check_booking",
    "find_missing_fields",
    "BOOKING_CONFIRMED_MESSAGE",
    "BOOKING_FAILED_MESSAGE",
]
