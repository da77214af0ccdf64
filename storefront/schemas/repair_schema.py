"""Repair booking data models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.catalog import TIME_SLOTS
from storefront.utils import is_blank, parse_iso_date

# JSON field names of a booking submission, in form order.
BOOKING_FIELDS: tuple[str, ...] = (
    "name",
    "contact",
    "address",
    "repairType",
    "description",
    "date",
    "time",
)


class RepairStatus(str, Enum):
    """Lifecycle status of a repair record."""

    REQUESTED = "requested"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RepairBookingRequest(BaseModel):
    """A booking submission as posted by the form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    contact: str
    address: str
    repair_type: str = Field(alias="repairType")
    description: str
    date: str
    time: str

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, value):
        return value.strip() if isinstance(value, str) else value


class RepairRecord(BaseModel):
    """Persisted repair booking document.

    Mirrors the store's schema: every input field non-blank, ``date`` in
    ISO format, ``time`` one of the fixed slots and ``status`` inside
    :class:`RepairStatus`.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    contact: str
    address: str
    repair_type: str = Field(alias="repairType")
    description: str
    date: str
    time: str
    status: RepairStatus = RepairStatus.REQUESTED
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("name", "contact", "address", "repair_type", "description")
    @classmethod
    def check_required(cls, value: str) -> str:
        if is_blank(value):
            raise ValueError("must not be empty")
        return value

    @field_validator("date")
    @classmethod
    def check_iso_date(cls, value: str) -> str:
        if parse_iso_date(value) is None:
            raise ValueError("must be a YYYY-MM-DD date")
        return value

    @field_validator("time")
    @classmethod
    def check_time_slot(cls, value: str) -> str:
        if value not in TIME_SLOTS:
            raise ValueError(f"must be one of {list(TIME_SLOTS)}")
        return value


class MessageResponse(BaseModel):
    """Body of every booking response, success or failure."""
    message: str


class CategoriesResponse(BaseModel):
    """Repair categories and time slots offered by the form selectors."""

    model_config = ConfigDict(populate_by_name=True)

    categories: list[str]
    time_slots: list[str] = Field(default_factory=list, alias="timeSlots")
    business: Optional[str] = None
