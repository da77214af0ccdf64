"""Static repair catalog and the fixed appointment time slots."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

REPAIR_CATALOG: list[dict] = [
    {
        "id": 1,
        "category": "Laptop Repair",
        "description": "Screen replacement, keyboard and battery faults, boards that won't power on.",
        "price_range": "$60 - $250",
    },
    {
        "id": 2,
        "category": "Mobile Phone Repair",
        "description": "Cracked screens, charging ports, batteries and water damage.",
        "price_range": "$40 - $180",
    },
    {
        "id": 3,
        "category": "TV Repair",
        "description": "Backlight, power supply and HDMI board repairs for LED and LCD sets.",
        "price_range": "$80 - $300",
    },
    {
        "id": 4,
        "category": "Home Appliance Repair",
        "description": "Washing machines, refrigerators, microwaves and ovens.",
        "price_range": "$70 - $350",
    },
    {
        "id": 5,
        "category": "Air Conditioner Repair",
        "description": "Gas top-ups, compressor faults, cleaning and remote issues.",
        "price_range": "$90 - $400",
    },
    {
        "id": 6,
        "category": "Electrical Wiring",
        "description": "Faulty sockets, switchboards, tripping breakers and new points.",
        "price_range": "$50 - $500",
    },
]

# slot value -> display label
TIME_SLOTS: dict[str, str] = {
    "9:00 AM - 12:00 PM": "Morning (9:00 AM - 12:00 PM)",
    "12:00 PM - 3:00 PM": "Early Afternoon (12:00 PM - 3:00 PM)",
    "3:00 PM - 6:00 PM": "Late Afternoon (3:00 PM - 6:00 PM)",
}


def get_repair_categories() -> list[str]:
    """Return the category names in catalog order.

    This is the single source of truth for the form's category selector
    and for server-side repairType validation.
    """
    return [entry["category"] for entry in REPAIR_CATALOG]


def is_known_category(name: str) -> bool:
    """Exact match against the catalog; the form only ever sends catalog values."""
    return name in get_repair_categories()


def get_repair_details(category: str) -> Optional[dict]:
    """Get the catalog entry for a category, matching case-insensitively."""
    normalized = category.lower().strip()
    for entry in REPAIR_CATALOG:
        if entry["category"].lower() == normalized:
            return dict(entry)
    return None


def is_valid_time_slot(slot: str) -> bool:
    return slot in TIME_SLOTS


def get_time_slot_label(slot: str) -> Optional[str]:
    return TIME_SLOTS.get(slot)
