"""
Booking form controller: field state, one-at-a-time submission, result notification.

The form state is an immutable value. Every edit produces a new state, and
the controller only ever swaps ``self.state`` for the next value.

Usage:
    form = BookingForm(BookingApiClient(session), NavigationContext(repair_type="TV Repair"))
    form.update_field("name", "Jane")
    ...
    await form.submit()
    if form.state.notification.visible:
        show(form.state.notification.message)
        form.dismiss_notification()
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from storefront.client.api_client import (
    GENERIC_FAILURE_MESSAGE,
    BookingApiClient,
    BookingSubmissionError,
)
from storefront.client.session import NavigationContext
from storefront.utils import is_blank

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    NONE = ""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """The result modal shown after a submission settles."""

    kind: NotificationKind = NotificationKind.NONE
    message: str = ""
    visible: bool = False

    @property
    def title(self) -> str:
        return "Success!" if self.kind == NotificationKind.SUCCESS else "Error"

    def hidden(self) -> "Notification":
        return replace(self, visible=False)


@dataclass(frozen=True)
class FormField:
    """Schema for a single form input."""

    name: str
    label: str
    attr: str
    multiline: bool = False


FORM_FIELDS: list[FormField] = [
    FormField(name="name", label="Name", attr="name"),
    FormField(name="contact", label="Contact", attr="contact"),
    FormField(name="address", label="Address", attr="address"),
    FormField(name="repairType", label="Repair Type", attr="repair_type"),
    FormField(name="description", label="Description", attr="description", multiline=True),
    FormField(name="date", label="Date", attr="date"),
    FormField(name="time", label="Preferred Time", attr="time"),
]

_ATTR_BY_NAME: dict[str, str] = {f.name: f.attr for f in FORM_FIELDS}


@dataclass(frozen=True)
class BookingFormState:
    """Input values plus the transient UI flags of one booking form."""

    name: str = ""
    contact: str = ""
    address: str = ""
    repair_type: str = ""
    description: str = ""
    date: str = ""
    time: str = ""
    is_submitting: bool = False
    notification: Notification = field(default_factory=Notification)

    def update(self, field_name: str, value: str) -> "BookingFormState":
        """Return a copy with one input replaced. ``field_name`` is the form input name."""
        try:
            attr = _ATTR_BY_NAME[field_name]
        except KeyError:
            raise ValueError(f"Unknown form field: {field_name}") from None
        return replace(self, **{attr: value})

    def get(self, field_name: str) -> str:
        return getattr(self, _ATTR_BY_NAME[field_name])

    def to_payload(self) -> dict[str, str]:
        """The JSON body for ``POST /repairs/schedule``."""
        return {f.name: getattr(self, f.attr) for f in FORM_FIELDS}

    def cleared(self) -> "BookingFormState":
        """Empty every input, keeping the UI flags."""
        empty = {f.attr: "" for f in FORM_FIELDS}
        return replace(self, **empty)

    def is_empty(self) -> bool:
        return all(getattr(self, f.attr) == "" for f in FORM_FIELDS)


def initial_state(prefill: Optional[NavigationContext] = None) -> BookingFormState:
    """Fresh form state, optionally pre-populated from the previous screen."""
    state = BookingFormState()
    if prefill is None:
        return state
    if prefill.repair_type:
        state = state.update("repairType", prefill.repair_type)
    if prefill.description:
        state = state.update("description", prefill.description)
    return state


class BookingForm:
    """
    Client-side controller for the repair booking form.

    Only one submission may be in flight per form instance; ``submit`` is a
    no-op while ``state.is_submitting`` is set.
    """

    def __init__(self, client: BookingApiClient, prefill: Optional[NavigationContext] = None) -> None:
        self.client = client
        self.state = initial_state(prefill)

    def initialize(self, prefill: Optional[NavigationContext] = None) -> None:
        """Reset to a fresh state, as when the form is mounted."""
        self.state = initial_state(prefill)

    def update_field(self, field_name: str, value: str) -> None:
        self.state = self.state.update(field_name, value)

    def required_missing(self) -> list[str]:
        """Input names still blank. Every form input is required."""
        return [f.name for f in FORM_FIELDS if is_blank(self.state.get(f.name))]

    @property
    def is_submitting(self) -> bool:
        return self.state.is_submitting

    async def submit(self) -> bool:
        """
        Send the current fields to the booking API.

        Returns:
            True if a request was issued, False if one was already in flight.
        """
        if self.state.is_submitting:
            logger.debug("Submit ignored: a booking is already in flight")
            return False

        self.state = replace(self.state, is_submitting=True)
        payload = self.state.to_payload()
        logger.info("Submitting repair booking for %s", payload.get("repairType") or "unknown repair")

        try:
            message = await self.client.schedule_repair(payload)
        except BookingSubmissionError as exc:
            logger.warning("Repair booking failed: %s", exc.message)
            self.state = replace(
                self.state,
                notification=Notification(NotificationKind.ERROR, exc.message, visible=True),
            )
        except Exception:
            logger.exception("Repair booking failed unexpectedly")
            self.state = replace(
                self.state,
                notification=Notification(NotificationKind.ERROR, GENERIC_FAILURE_MESSAGE, visible=True),
            )
        else:
            self.state = replace(
                self.state.cleared(),
                notification=Notification(NotificationKind.SUCCESS, message, visible=True),
            )
        finally:
            self.state = replace(self.state, is_submitting=False)
        return True

    def dismiss_notification(self) -> None:
        self.state = replace(self.state, notification=self.state.notification.hidden())
