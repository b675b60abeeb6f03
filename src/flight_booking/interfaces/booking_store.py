"""
Booking store interface definitions
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..types import Booking


class BookingStoreInterface(ABC):
    """Interface for booking storage operations"""

    @abstractmethod
    def find_all(self) -> List[Booking]:
        """Get all bookings in insertion order"""
        pass

    @abstractmethod
    def find_by_identity(self, booking_number: str, first_name: str, last_name: str) -> Optional[Booking]:
        """Find a booking by number and customer name, ignoring case"""
        pass

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """Insert or replace a booking keyed by its booking number"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored bookings"""
        pass
