"""
Interface definitions for flight booking components
"""

from .booking_store import BookingStoreInterface
from .booking_service import BookingServiceInterface

__all__ = [
    "BookingStoreInterface",
    "BookingServiceInterface",
]
