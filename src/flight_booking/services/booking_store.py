"""
In-memory booking store.

Holds the authoritative set of bookings keyed by booking number, together with
the customers that own them. Callers only ever receive copies of stored
bookings; changes become visible to other callers once passed to ``save``.
"""

import random
import threading
from datetime import date, timedelta
from typing import Dict, List, Optional

import structlog

from ..interfaces.booking_store import BookingStoreInterface
from ..types import Booking, BookingClass, BookingStatus, Customer
from ..utils.validators import names_match


logger = structlog.get_logger(__name__)


DEMO_CUSTOMERS = [
    ("John", "Doe"),
    ("Jane", "Smith"),
    ("Michael", "Johnson"),
    ("Sarah", "Williams"),
    ("Robert", "Taylor"),
]

DEMO_AIRPORT_CODES = [
    "LAX", "SFO", "JFK", "LHR", "CDG", "ARN",
    "HEL", "TXL", "MUC", "FRA", "MAD", "SJC",
]


class BookingStore(BookingStoreInterface):
    """Thread-safe in-memory store with upsert-by-booking-number semantics"""

    def __init__(self):
        self._bookings: Dict[str, Booking] = {}
        self._customers: List[Customer] = []
        self._lock = threading.RLock()

    def find_all(self) -> List[Booking]:
        with self._lock:
            return [booking.copy() for booking in self._bookings.values()]

    def find_by_identity(self, booking_number: str, first_name: str, last_name: str) -> Optional[Booking]:
        with self._lock:
            for booking in self._bookings.values():
                if (
                    names_match(booking.booking_number, booking_number)
                    and names_match(booking.customer.first_name, first_name)
                    and names_match(booking.customer.last_name, last_name)
                ):
                    return booking.copy()
        return None

    def save(self, booking: Booking) -> Booking:
        """
        Insert or replace a booking.

        An existing booking with the same number is replaced entirely and
        keeps its position; a new number is appended.
        """
        stored = booking.copy()
        with self._lock:
            previous = self._bookings.get(booking.booking_number)
            self._bookings[booking.booking_number] = stored
            self._link_customer(stored, previous)

        logger.debug("Booking saved", booking_number=booking.booking_number, replaced=previous is not None)
        return booking

    def count(self) -> int:
        with self._lock:
            return len(self._bookings)

    def customers(self) -> List[Customer]:
        with self._lock:
            return list(self._customers)

    def add_customer(self, customer: Customer) -> Customer:
        with self._lock:
            if not any(existing is customer for existing in self._customers):
                self._customers.append(customer)
        return customer

    def seed_demo_data(self, today: Optional[date] = None, rng: Optional[random.Random] = None) -> List[Booking]:
        """Create one confirmed booking for each demo customer"""
        today = today or date.today()
        rng = rng or random.Random()
        classes = list(BookingClass)
        seeded = []

        for i, (first_name, last_name) in enumerate(DEMO_CUSTOMERS):
            customer = self.add_customer(Customer(first_name, last_name))
            booking = Booking(
                booking_number=f"BK10{i + 1}",
                date=today + timedelta(days=2 * i + 1),
                customer=customer,
                status=BookingStatus.CONFIRMED,
                departure_airport=rng.choice(DEMO_AIRPORT_CODES),
                arrival_airport=rng.choice(DEMO_AIRPORT_CODES),
                booking_class=rng.choice(classes),
            )
            seeded.append(self.save(booking))

        logger.info("Demo bookings seeded", count=len(seeded))
        return seeded

    def _link_customer(self, stored: Booking, previous: Optional[Booking]) -> None:
        # keep the informational back-reference pointing at the stored copy
        if previous is not None and previous.customer is not stored.customer:
            previous.customer.bookings[:] = [b for b in previous.customer.bookings if b != stored]
        customer = stored.customer
        self.add_customer(customer)
        customer.bookings[:] = [b for b in customer.bookings if b != stored]
        customer.bookings.append(stored)
