"""
Tests for agent-facing booking tools
"""

import pytest

from flight_booking.services import BookingTools, TOOL_DESCRIPTIONS

from conftest import days_from_today


class TestBookingTools:
    """Test tool results returned to an agent"""

    @pytest.fixture
    def tools(self, service):
        return BookingTools(service)

    def test_get_booking_details(self, tools, make_booking):
        make_booking("BK101")
        result = tools.get_booking_details("BK101", "john", "doe")

        assert result.success
        assert result.error is None
        assert result.data["bookingNumber"] == "BK101"
        assert result.data["date"] == days_from_today(5).isoformat()

    def test_not_found_is_reported(self, tools):
        result = tools.get_booking_details("BK999", "John", "Doe")

        assert not result.success
        assert result.error_code == "BOOKING_NOT_FOUND"
        assert result.error == "Booking not found for booking number: BK999"

    def test_change_accepts_iso_string(self, tools, make_booking):
        make_booking("BK101")
        result = tools.change_booking("BK101", "John", "Doe", days_from_today(10).isoformat(), "sfo", "bos")

        assert result.success
        assert result.data["date"] == days_from_today(10).isoformat()
        assert result.data["departure"] == "SFO"
        assert result.data["arrival"] == "BOS"

    def test_change_rejects_unparseable_date(self, tools, make_booking):
        make_booking("BK101")
        result = tools.change_booking("BK101", "John", "Doe", "tomorrow-ish", "SFO", "BOS")

        assert not result.success
        assert result.error_code == "POLICY_VIOLATION"
        assert "ISO date" in result.error

    def test_change_rejects_non_string_date(self, tools, make_booking):
        make_booking("BK101")
        result = tools.change_booking("BK101", "John", "Doe", 20240610, "SFO", "BOS")

        assert not result.success
        assert result.error_code == "POLICY_VIOLATION"
        assert result.error == "New flight date must be an ISO date (YYYY-MM-DD)."

    def test_policy_reason_is_relayed_verbatim(self, tools, make_booking):
        make_booking("BK101", days_out=1)
        result = tools.cancel_booking("BK101", "John", "Doe")

        assert not result.success
        assert result.error_code == "POLICY_VIOLATION"
        assert result.error == "Booking cannot be cancelled within 48 hours of the flight date."

    def test_cancel_booking(self, tools, make_booking):
        make_booking("BK101")
        result = tools.cancel_booking("BK101", "John", "Doe")

        assert result.success
        assert result.data["status"] == "CANCELLED"

    def test_get_all_bookings(self, tools, make_booking):
        make_booking("BK101")
        make_booking("BK102", first_name="Jane", last_name="Smith")
        result = tools.get_all_bookings()

        assert result.success
        assert [b["bookingNumber"] for b in result.data] == ["BK101", "BK102"]

    def test_descriptions_state_lead_times(self):
        assert "24 hours" in TOOL_DESCRIPTIONS["change_booking"]
        assert "48 hours" in TOOL_DESCRIPTIONS["cancel_booking"]
        assert set(TOOL_DESCRIPTIONS) == {
            "get_booking_details", "change_booking", "cancel_booking", "get_all_bookings"
        }
