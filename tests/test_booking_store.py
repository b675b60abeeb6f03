"""
Tests for the in-memory booking store
"""

import random
import pytest
from datetime import timedelta

from flight_booking.services.booking_store import BookingStore, DEMO_AIRPORT_CODES
from flight_booking.types import Booking, BookingClass, BookingStatus, Customer

from conftest import TODAY, days_from_today


class TestFindAll:
    """Test full scan"""

    def test_insertion_order(self, store, make_booking):
        make_booking("BK101")
        make_booking("BK102", first_name="Jane", last_name="Smith")
        make_booking("BK103", first_name="Michael", last_name="Johnson")
        assert [b.booking_number for b in store.find_all()] == ["BK101", "BK102", "BK103"]

    def test_returned_list_is_a_copy(self, store, make_booking):
        """Mutating the returned list does not affect the store"""
        make_booking("BK101")
        bookings = store.find_all()
        bookings.clear()
        assert store.count() == 1

    def test_returned_bookings_are_copies(self, store, make_booking):
        """Mutating a returned booking does not affect the store until saved"""
        make_booking("BK101")
        booking = store.find_all()[0]
        booking.status = BookingStatus.CANCELLED
        booking.departure_airport = "SFO"

        stored = store.find_all()[0]
        assert stored.status == BookingStatus.CONFIRMED
        assert stored.departure_airport == "LAX"

    def test_empty_store(self, store):
        assert store.find_all() == []
        assert store.count() == 0


class TestFindByIdentity:
    """Test compound case-insensitive lookup"""

    def test_case_insensitive_match(self, store, make_booking):
        make_booking("BK101", first_name="John", last_name="Doe")
        booking = store.find_by_identity("bk101", "JOHN", "doe")
        assert booking is not None
        assert booking.booking_number == "BK101"

    def test_all_three_fields_must_match(self, store, make_booking):
        make_booking("BK101", first_name="John", last_name="Doe")
        assert store.find_by_identity("BK102", "John", "Doe") is None
        assert store.find_by_identity("BK101", "Jane", "Doe") is None
        assert store.find_by_identity("BK101", "John", "Smith") is None

    def test_lowercase_comparison_only(self, store, make_booking):
        make_booking("BK101", first_name="Anna", last_name="Strauß")
        assert store.find_by_identity("BK101", "anna", "STRAUß") is not None
        assert store.find_by_identity("BK101", "Anna", "STRAUSS") is None

    def test_none_arguments_match_nothing(self, store, make_booking):
        make_booking("BK101")
        assert store.find_by_identity(None, "John", "Doe") is None
        assert store.find_by_identity("BK101", None, "Doe") is None
        assert store.find_by_identity("BK101", "John", None) is None

    def test_result_is_a_copy(self, store, make_booking):
        make_booking("BK101")
        booking = store.find_by_identity("BK101", "John", "Doe")
        booking.date = days_from_today(30)
        assert store.find_by_identity("BK101", "John", "Doe").date == days_from_today(5)


class TestSave:
    """Test upsert by booking number"""

    def test_insert_appends(self, store, make_booking):
        make_booking("BK101")
        make_booking("BK102")
        assert store.count() == 2
        assert store.find_all()[-1].booking_number == "BK102"

    def test_replace_keeps_count_and_position(self, store, make_booking):
        make_booking("BK101")
        make_booking("BK102")
        make_booking("BK101", departure="SFO", arrival="BOS", booking_class=BookingClass.BUSINESS)

        bookings = store.find_all()
        assert store.count() == 2
        assert [b.booking_number for b in bookings] == ["BK101", "BK102"]
        assert bookings[0].departure_airport == "SFO"
        assert bookings[0].arrival_airport == "BOS"
        assert bookings[0].booking_class == BookingClass.BUSINESS

    def test_replace_is_not_a_merge(self, store, make_booking):
        """The replacement's fields win entirely, including the customer"""
        make_booking("BK101", first_name="John", last_name="Doe")
        make_booking("BK101", first_name="Jane", last_name="Smith", days_out=9)

        assert store.find_by_identity("BK101", "John", "Doe") is None
        replaced = store.find_by_identity("BK101", "Jane", "Smith")
        assert replaced.date == days_from_today(9)

    def test_replace_leaves_other_bookings_untouched(self, store, make_booking):
        make_booking("BK101")
        make_booking("BK102", first_name="Jane", last_name="Smith", departure="CDG")
        make_booking("BK101", departure="SFO")
        other = store.find_by_identity("BK102", "Jane", "Smith")
        assert other.departure_airport == "CDG"

    def test_saved_instance_is_detached(self, store):
        """Changing a booking after saving it does not leak into the store"""
        booking = Booking(
            booking_number="BK200",
            date=days_from_today(3),
            customer=Customer("Ada", "Lovelace"),
            status=BookingStatus.CONFIRMED,
            departure_airport="LHR",
            arrival_airport="CDG",
            booking_class=BookingClass.ECONOMY,
        )
        store.save(booking)
        booking.arrival_airport = "FRA"
        assert store.find_by_identity("BK200", "Ada", "Lovelace").arrival_airport == "CDG"

    def test_customer_back_reference(self, store):
        customer = Customer("John", "Doe")
        for number in ("BK101", "BK102", "BK101"):
            store.save(Booking(
                booking_number=number,
                date=days_from_today(5),
                customer=customer,
                status=BookingStatus.CONFIRMED,
                departure_airport="LAX",
                arrival_airport="JFK",
                booking_class=BookingClass.ECONOMY,
            ))
        assert sorted(b.booking_number for b in customer.bookings) == ["BK101", "BK102"]
        assert store.customers() == [customer]


class TestSeedDemoData:
    """Test demo data seeding"""

    def test_seeds_five_confirmed_bookings(self, store):
        seeded = store.seed_demo_data(today=TODAY, rng=random.Random(7))

        assert len(seeded) == 5
        assert store.count() == 5
        assert [b.booking_number for b in store.find_all()] == ["BK101", "BK102", "BK103", "BK104", "BK105"]
        assert [b.date for b in store.find_all()] == [TODAY + timedelta(days=d) for d in (1, 3, 5, 7, 9)]
        for booking in store.find_all():
            assert booking.status == BookingStatus.CONFIRMED
            assert booking.departure_airport in DEMO_AIRPORT_CODES
            assert booking.arrival_airport in DEMO_AIRPORT_CODES
            assert booking.booking_class in BookingClass

    def test_seed_customers(self, store):
        store.seed_demo_data(today=TODAY, rng=random.Random(7))
        names = [(c.first_name, c.last_name) for c in store.customers()]
        assert names == [
            ("John", "Doe"), ("Jane", "Smith"), ("Michael", "Johnson"),
            ("Sarah", "Williams"), ("Robert", "Taylor"),
        ]
        assert store.find_by_identity("BK104", "sarah", "WILLIAMS") is not None

    def test_same_seed_same_data(self):
        first, second = BookingStore(), BookingStore()
        first.seed_demo_data(today=TODAY, rng=random.Random(42))
        second.seed_demo_data(today=TODAY, rng=random.Random(42))
        route = lambda s: [(b.departure_airport, b.arrival_airport, b.booking_class) for b in s.find_all()]
        assert route(first) == route(second)
