"""
HTTP client for the booking API.

In the storefront this is what the booking page calls; the console client
and the tests drive it too. Any non-success outcome, including a network
failure, becomes a :class:`BookingSubmissionError` carrying a message that
is safe to show the customer.
"""

import logging
from typing import Any, Optional

import httpx

from storefront.client.session import ClientSession
from storefront.config import settings

logger = logging.getLogger(__name__)

CATEGORIES_UNAVAILABLE_MESSAGE = "Repair categories are unavailable right now."
GENERIC_FAILURE_MESSAGE = "An error occurred while scheduling the repair. Please try again."
DEFAULT_SUCCESS_MESSAGE = "Your repair has been scheduled."


class BookingSubmissionError(Exception):
    """A booking call did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _extract_message(response: httpx.Response) -> Optional[str]:
    """Pull ``message`` out of a JSON body, tolerating anything else."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None


class BookingApiClient:
    """Thin async wrapper over the booking endpoints."""

    def __init__(
        self,
        session: ClientSession,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = settings.client.timeout_seconds,
    ) -> None:
        self.session = session
        self.transport = transport
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.session.base_url,
            headers=self.session.headers(),
            timeout=self.timeout,
            transport=self.transport,
        )

    async def schedule_repair(self, payload: dict[str, str]) -> str:
        """POST a booking and return the server's confirmation message."""
        async with self._client() as client:
            try:
                response = await client.post("/repairs/schedule", json=payload)
            except httpx.HTTPError as exc:
                logger.error("Booking request failed to reach the API: %s", exc)
                raise BookingSubmissionError(GENERIC_FAILURE_MESSAGE) from exc

        message = _extract_message(response)
        if response.is_success:
            return message or DEFAULT_SUCCESS_MESSAGE

        logger.warning("Booking rejected with HTTP %d: %s", response.status_code, message)
        raise BookingSubmissionError(
            message or GENERIC_FAILURE_MESSAGE, status_code=response.status_code
        )

    async def list_repair_categories(self) -> list[str]:
        """Fetch the category names for the form selector."""
        async with self._client() as client:
            try:
                response = await client.get("/repairs/categories")
                response.raise_for_status()
            except httpx.HTTPError as exc:
                logger.error("Could not load repair categories: %s", exc)
                raise BookingSubmissionError(CATEGORIES_UNAVAILABLE_MESSAGE) from exc

        try:
            body: Any = response.json()
        except ValueError as exc:
            logger.error("Repair categories response is not JSON")
            raise BookingSubmissionError(CATEGORIES_UNAVAILABLE_MESSAGE) from exc
        categories = body.get("categories") if isinstance(body, dict) else None
        if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
            logger.error("Repair categories response has an unexpected shape")
            raise BookingSubmissionError(CATEGORIES_UNAVAILABLE_MESSAGE)
        return list(categories)
