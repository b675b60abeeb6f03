"""
Validation utilities
"""

import re
from datetime import date, datetime
from typing import Optional, Union

AIRPORT_CODE_PATTERN = re.compile(r'^[A-Z]{3}$')


def normalize_airport_code(code: Optional[str]) -> Optional[str]:
    """
    Trim and uppercase an airport code.
    Returns None when the result is not exactly 3 letters.
    """
    if code is None:
        return None

    normalized = code.strip().upper()
    if not AIRPORT_CODE_PATTERN.match(normalized):
        return None
    return normalized


def names_match(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive string equality; None never matches"""
    if left is None or right is None:
        return False
    return left.lower() == right.lower()


def parse_flight_date(value: Union[date, str, None]) -> Optional[date]:
    """
    Accept a date or an ISO formatted string (YYYY-MM-DD).
    Raises ValueError for anything else, including strings that are not ISO dates.
    """
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported flight date value: {value!r}")
    return date.fromisoformat(value.strip())
