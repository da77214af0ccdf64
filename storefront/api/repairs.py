"""
Repair booking routes.

``POST /repairs/schedule`` validates a booking submission and writes a
repair record. Every outcome is answered with a ``{"message": ...}`` body:
400 for anything the customer can fix, 500 for store failures. Internal
error detail is logged, never returned.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from storefront.catalog import TIME_SLOTS, get_repair_categories, is_known_category, is_valid_time_slot
from storefront.config import settings
from storefront.logging_context import get_request_logger
from storefront.schemas.repair_schema import (
    BOOKING_FIELDS,
    CategoriesResponse,
    MessageResponse,
    RepairBookingRequest,
)
from storefront.store import StoreError
from storefront.utils import is_blank, parse_iso_date

logger = get_request_logger(__name__)

router = APIRouter(prefix="/repairs", tags=["repairs"])

BOOKING_CONFIRMED_MESSAGE = (
    "Repair booking scheduled successfully! We will contact you to confirm your appointment."
)
BOOKING_FAILED_MESSAGE = "An error occurred while scheduling the repair. Please try again."
INVALID_BODY_MESSAGE = "Invalid request body."


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def find_missing_fields(payload: dict) -> list[str]:
    """Names of booking fields that are absent, non-string or blank."""
    return [name for name in BOOKING_FIELDS if is_blank(payload.get(name))]


def check_booking(booking: RepairBookingRequest, today: date) -> Optional[str]:
    """Return a customer-facing problem description, or None when the booking is acceptable."""
    booking_date = parse_iso_date(booking.date)
    if booking_date is None:
        return "Invalid date. Use the format YYYY-MM-DD."
    if booking_date < today:
        return "The repair date cannot be in the past."
    if not is_valid_time_slot(booking.time):
        return f"Invalid time slot. Choose one of: {', '.join(TIME_SLOTS)}."
    if not is_known_category(booking.repair_type):
        return f"Unknown repair type: {booking.repair_type}."
    return None


@router.post("/schedule", response_model=MessageResponse)
async def schedule_repair(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        logger.info("Booking rejected: body is not valid JSON")
        return message_response(400, INVALID_BODY_MESSAGE)
    if not isinstance(payload, dict):
        logger.info("Booking rejected: body is not a JSON object")
        return message_response(400, INVALID_BODY_MESSAGE)

    missing = find_missing_fields(payload)
    if missing:
        logger.info("Booking rejected, missing fields: %s", missing)
        return message_response(400, f"Missing required fields: {', '.join(missing)}.")

    booking = RepairBookingRequest.model_validate({name: payload[name] for name in BOOKING_FIELDS})
    problem = check_booking(booking, today=date.today())
    if problem:
        logger.info("Booking rejected: %s", problem)
        return message_response(400, problem)
    booking = booking.model_copy(update={"date": parse_iso_date(booking.date).isoformat()})

    store = request.app.state.repair_store
    try:
        record = await run_in_threadpool(store.insert, booking.model_dump(by_alias=True))
    except StoreError:
        logger.exception("Failed to persist repair booking")
        return message_response(500, BOOKING_FAILED_MESSAGE)

    logger.info("Repair booking %s scheduled", record["id"])
    return MessageResponse(message=BOOKING_CONFIRMED_MESSAGE)


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories():
    return CategoriesResponse(
        categories=get_repair_categories(),
        time_slots=list(TIME_SLOTS),
        business=settings.business.name,
    )
