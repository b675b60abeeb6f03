"""
Utility modules for flight booking service
"""

from .logger import setup_logging
from .validators import normalize_airport_code, names_match, parse_flight_date

__all__ = [
    "setup_logging",
    "normalize_airport_code",
    "names_match",
    "parse_flight_date",
]
