"""
Booking tools for a conversational agent.

The agent calls these with already-parsed arguments. Domain errors are never
raised to the agent; they come back as a failed ToolResult whose ``error`` is
the policy reason, which the agent can relay to the customer word for word.
"""

from datetime import date
from typing import Callable, Dict, Union

import structlog

from ..interfaces.booking_service import BookingServiceInterface
from ..types import BookingServiceError, BookingPolicyViolationError, ToolResult
from ..utils.validators import parse_flight_date


logger = structlog.get_logger(__name__)


TOOL_DESCRIPTIONS: Dict[str, str] = {
    "get_booking_details": (
        "Retrieves information about an existing booking, such as the flight date, "
        "booking status, departure and arrival airports, and booking class."
    ),
    "change_booking": (
        "Modifies an existing booking. This includes making changes to the flight date, "
        "departure airport, and arrival airport. "
        "Changes are only allowed up to 24 hours before the flight."
    ),
    "cancel_booking": (
        "Cancels an existing booking. "
        "Cancellation is only allowed up to 48 hours before the flight."
    ),
    "get_all_bookings": "Lists every booking in the system.",
}


class BookingTools:
    """Agent-facing wrapper around the booking service"""

    def __init__(self, service: BookingServiceInterface):
        self.service = service

    def get_booking_details(self, booking_number: str, first_name: str, last_name: str) -> ToolResult:
        return self._run(
            "get_booking_details",
            lambda: self.service.get_booking_details(booking_number, first_name, last_name)
        )

    def change_booking(
        self,
        booking_number: str,
        first_name: str,
        last_name: str,
        new_flight_date: Union[date, str, None],
        new_departure_airport: str,
        new_arrival_airport: str
    ) -> ToolResult:
        def call():
            try:
                parsed_date = parse_flight_date(new_flight_date)
            except ValueError:
                raise BookingPolicyViolationError("New flight date must be an ISO date (YYYY-MM-DD).")
            return self.service.change_booking(
                booking_number, first_name, last_name,
                parsed_date, new_departure_airport, new_arrival_airport
            )

        return self._run("change_booking", call)

    def cancel_booking(self, booking_number: str, first_name: str, last_name: str) -> ToolResult:
        return self._run(
            "cancel_booking",
            lambda: self.service.cancel_booking(booking_number, first_name, last_name)
        )

    def get_all_bookings(self) -> ToolResult:
        return self._run("get_all_bookings", self.service.get_all_bookings)

    def _run(self, tool_name: str, call: Callable) -> ToolResult:
        try:
            result = call()
        except BookingServiceError as e:
            logger.info("Booking tool rejected", tool=tool_name, error_code=e.error_code, reason=str(e))
            return ToolResult(success=False, error=str(e), error_code=e.error_code)

        if isinstance(result, list):
            data = [view.model_dump(mode="json", by_alias=True) for view in result]
        else:
            data = result.model_dump(mode="json", by_alias=True)
        return ToolResult(success=True, data=data)
