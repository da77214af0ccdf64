"""Shared utilities used across the storefront."""

import re
from datetime import date
from typing import Any, Optional

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings.

    Examples:
        >>> is_blank("  ")
        True
        >>> is_blank("Laptop Repair")
        False
    """
    return not isinstance(value, str) or not value.strip()


def parse_iso_date(value: str) -> Optional[date]:
    """Parse a zero-padded YYYY-MM-DD string, returning None when it doesn't parse.

    Examples:
        >>> parse_iso_date("2025-01-10")
        datetime.date(2025, 1, 10)
        >>> parse_iso_date("2025-1-10") is None
        True
        >>> parse_iso_date("10/01/2025") is None
        True
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not _ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
