from storefront.client.api_client import BookingApiClient, BookingSubmissionError
from storefront.client.booking_form import (
    FORM_FIELDS,
    BookingForm,
    BookingFormState,
    Notification,
    NotificationKind,
)
from storefront.client.session import ClientSession, NavigationContext

__all__ = [
    "BookingApiClient",
    "BookingSubmissionError",
    "BookingForm",
    "BookingFormState",
    "FORM_FIELDS",
    "Notification",
    "NotificationKind",
    "ClientSession",
    "NavigationContext",
]
