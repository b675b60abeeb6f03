"""
Booking policy service.

Every change and cancellation rule lives here. Lead times are counted in
calendar days: a flight is inside the window when its date is strictly before
``today + lead days``, so a flight exactly that many days out is still
eligible.
"""

import threading
from datetime import date, datetime, timedelta
from typing import Callable, List, Optional

import structlog

from ..interfaces.booking_service import BookingServiceInterface
from ..interfaces.booking_store import BookingStoreInterface
from ..types import (
    Booking, BookingStatus, BookingView,
    BookingNotFoundError, BookingPolicyViolationError
)
from ..utils.validators import normalize_airport_code
from .audit_logger import AuditLogger, audit_logger as default_audit_logger


logger = structlog.get_logger(__name__)

CHANGE_LEAD_DAYS = 1
CANCEL_LEAD_DAYS = 2


class BookingService(BookingServiceInterface):
    """Enforces booking change/cancellation policy on top of a booking store"""

    def __init__(
        self,
        store: BookingStoreInterface,
        audit: Optional[AuditLogger] = None,
        today: Callable[[], date] = date.today
    ):
        self.store = store
        self.audit = audit or default_audit_logger
        self.today = today
        # read-check-save must not interleave between callers
        self._lock = threading.RLock()

    def get_all_bookings(self) -> List[BookingView]:
        return [self._to_view(booking) for booking in self.store.find_all()]

    def get_booking_details(self, booking_number: str, first_name: str, last_name: str) -> BookingView:
        booking = self._find_booking(booking_number, first_name, last_name)
        return self._to_view(booking)

    def change_booking(
        self,
        booking_number: str,
        first_name: str,
        last_name: str,
        new_flight_date: Optional[date],
        new_departure_airport: Optional[str],
        new_arrival_airport: Optional[str]
    ) -> BookingView:
        """
        Move a booking to a new date and route.

        Raises:
            BookingNotFoundError: no booking matches number and name
            BookingPolicyViolationError: booking is cancelled, the current or the
                new flight date is inside the 24 hour window, or an airport code
                is missing or malformed
        """
        with self._lock:
            booking = self._find_booking(booking_number, first_name, last_name)

            try:
                self._ensure_booking_is_active(booking)
                if self._is_within(booking.date, CHANGE_LEAD_DAYS):
                    raise BookingPolicyViolationError(
                        "Booking cannot be changed within 24 hours of the flight date."
                    )
                new_flight_date = self._validate_new_flight_date(new_flight_date)
                departure = self._normalize_airport_code(new_departure_airport, "New departure airport")
                arrival = self._normalize_airport_code(new_arrival_airport, "New arrival airport")
            except BookingPolicyViolationError as e:
                self.audit.log_policy_violation(booking.booking_number, "change", str(e))
                raise

            old_date = booking.date
            booking.date = new_flight_date
            booking.departure_airport = departure
            booking.arrival_airport = arrival
            self.store.save(booking)

        logger.info("Booking changed successfully", booking_number=booking.booking_number)
        self.audit.log_booking_changed(booking.booking_number, old_date, new_flight_date, departure, arrival)
        return self._to_view(booking)

    def cancel_booking(self, booking_number: str, first_name: str, last_name: str) -> BookingView:
        """
        Cancel a booking.

        Raises:
            BookingNotFoundError: no booking matches number and name
            BookingPolicyViolationError: booking is already cancelled or the
                flight is inside the 48 hour window
        """
        with self._lock:
            booking = self._find_booking(booking_number, first_name, last_name)

            try:
                self._ensure_booking_is_active(booking)
                if self._is_within(booking.date, CANCEL_LEAD_DAYS):
                    raise BookingPolicyViolationError(
                        "Booking cannot be cancelled within 48 hours of the flight date."
                    )
            except BookingPolicyViolationError as e:
                self.audit.log_policy_violation(booking.booking_number, "cancel", str(e))
                raise

            booking.status = BookingStatus.CANCELLED
            self.store.save(booking)

        logger.info("Booking cancelled successfully", booking_number=booking.booking_number)
        self.audit.log_booking_cancelled(booking.booking_number, booking.date)
        return self._to_view(booking)

    def _find_booking(self, booking_number: str, first_name: str, last_name: str) -> Booking:
        booking = self.store.find_by_identity(booking_number, first_name, last_name)
        self.audit.log_booking_lookup(booking_number, found=booking is not None)
        if booking is None:
            raise BookingNotFoundError(booking_number)
        return booking

    def _is_within(self, flight_date: date, lead_days: int) -> bool:
        return flight_date < self.today() + timedelta(days=lead_days)

    def _ensure_booking_is_active(self, booking: Booking) -> None:
        if booking.is_cancelled:
            raise BookingPolicyViolationError("Booking has already been cancelled.")

    def _validate_new_flight_date(self, new_flight_date: Optional[date]) -> date:
        if new_flight_date is None:
            raise BookingPolicyViolationError("New flight date is required.")
        if isinstance(new_flight_date, datetime):
            new_flight_date = new_flight_date.date()
        if self._is_within(new_flight_date, CHANGE_LEAD_DAYS):
            raise BookingPolicyViolationError(
                "New flight date must be at least 24 hours in the future."
            )
        return new_flight_date

    def _normalize_airport_code(self, airport: Optional[str], field_name: str) -> str:
        if airport is None:
            raise BookingPolicyViolationError(f"{field_name} is required.")
        normalized = normalize_airport_code(airport)
        if normalized is None:
            raise BookingPolicyViolationError(
                f"{field_name} must be a 3-letter uppercase IATA code."
            )
        return normalized

    def _to_view(self, booking: Booking) -> BookingView:
        return BookingView.from_booking(booking)
