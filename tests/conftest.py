"""
Shared fixtures for booking tests
"""

import pytest
from datetime import date, timedelta

from flight_booking.services import AuditLogger, BookingService, BookingStore
from flight_booking.types import Booking, BookingClass, BookingStatus, Customer


TODAY = date(2024, 6, 1)


def days_from_today(days: int) -> date:
    return TODAY + timedelta(days=days)


@pytest.fixture
def today():
    """Fixed 'today' used by the service under test"""
    return TODAY


@pytest.fixture
def store():
    """Empty booking store"""
    return BookingStore()


@pytest.fixture
def make_booking(store):
    """Factory saving a confirmed booking into the store"""
    def _make(
        booking_number="BK101",
        first_name="John",
        last_name="Doe",
        days_out=5,
        departure="LAX",
        arrival="JFK",
        booking_class=BookingClass.ECONOMY,
        status=BookingStatus.CONFIRMED
    ):
        booking = Booking(
            booking_number=booking_number,
            date=days_from_today(days_out),
            customer=Customer(first_name, last_name),
            status=status,
            departure_airport=departure,
            arrival_airport=arrival,
            booking_class=booking_class,
        )
        return store.save(booking)
    return _make


@pytest.fixture
def audit():
    """Audit logger that always records"""
    return AuditLogger(enabled=True)


@pytest.fixture
def service(store, audit):
    """Booking service pinned to TODAY"""
    return BookingService(store, audit=audit, today=lambda: TODAY)
