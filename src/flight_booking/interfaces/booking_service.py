"""
Booking service interface definitions
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from ..types import BookingView


class BookingServiceInterface(ABC):
    """Interface for booking policy operations"""

    @abstractmethod
    def get_all_bookings(self) -> List[BookingView]:
        """Get all bookings"""
        pass

    @abstractmethod
    def get_booking_details(self, booking_number: str, first_name: str, last_name: str) -> BookingView:
        """Get booking details"""
        pass

    @abstractmethod
    def change_booking(
        self,
        booking_number: str,
        first_name: str,
        last_name: str,
        new_flight_date: Optional[date],
        new_departure_airport: Optional[str],
        new_arrival_airport: Optional[str]
    ) -> BookingView:
        """Change flight date and route of a booking"""
        pass

    @abstractmethod
    def cancel_booking(self, booking_number: str, first_name: str, last_name: str) -> BookingView:
        """Cancel a booking"""
        pass
