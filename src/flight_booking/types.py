"""
Core data types for the flight booking service
"""

from enum import Enum
from typing import Optional, List, Any
from datetime import date, datetime
from dataclasses import dataclass, field, replace

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Alias so model fields may be named "date" without shadowing the type
FlightDate = date


class BookingStatus(str, Enum):
    """Lifecycle states of a booking"""
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class BookingClass(Enum):
    """Fare classes with their change and cancellation fees"""
    ECONOMY = (50, 75)
    PREMIUM_ECONOMY = (30, 50)
    BUSINESS = (0, 25)

    def __init__(self, change_fee: int, cancellation_fee: int):
        self.change_fee = change_fee
        self.cancellation_fee = cancellation_fee

    def __str__(self) -> str:
        return self.name


# Domain entities
@dataclass(eq=False)
class Customer:
    """Customer owning one or more bookings"""
    first_name: str
    last_name: str
    bookings: List["Booking"] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Booking:
    """
    A single flight reservation.

    Identity is the booking number alone: two bookings compare equal when
    their numbers match, whatever the rest of their fields say.
    """
    booking_number: str
    date: FlightDate
    customer: Customer
    status: BookingStatus
    departure_airport: str
    arrival_airport: str
    booking_class: BookingClass

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Booking):
            return NotImplemented
        return self.booking_number == other.booking_number

    def __hash__(self) -> int:
        return hash(self.booking_number)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "booking_number" and "booking_number" in self.__dict__:
            raise AttributeError("booking_number cannot be changed once a booking exists")
        super().__setattr__(name, value)

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    def copy(self) -> "Booking":
        """Shallow copy; the customer reference is shared"""
        return replace(self)


# Request and Response Models
class BookingView(BaseModel):
    """Caller-facing view of a booking"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_number: str = Field(..., description="Unique booking reference")
    first_name: str = Field(..., description="Customer first name")
    last_name: str = Field(..., description="Customer last name")
    date: FlightDate = Field(..., description="Flight date")
    status: BookingStatus = Field(..., description="Booking status")
    departure: str = Field(..., description="Departure airport code")
    arrival: str = Field(..., description="Arrival airport code")
    booking_class: str = Field(..., description="Fare class name")

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingView":
        return cls(
            booking_number=booking.booking_number,
            first_name=booking.customer.first_name,
            last_name=booking.customer.last_name,
            date=booking.date,
            status=booking.status,
            departure=booking.departure_airport,
            arrival=booking.arrival_airport,
            booking_class=booking.booking_class.name,
        )


class BookingChangeRequest(BaseModel):
    """Request body for changing a booking"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(..., min_length=1, description="Customer first name")
    last_name: str = Field(..., min_length=1, description="Customer last name")
    new_flight_date: FlightDate = Field(..., description="Requested flight date")
    new_departure_airport: str = Field(..., min_length=1, description="New departure airport code")
    new_arrival_airport: str = Field(..., min_length=1, description="New arrival airport code")


class ToolResult(BaseModel):
    """Outcome of a booking tool call made by an agent"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


# Custom Exceptions
class BookingServiceError(Exception):
    """Base exception for booking service"""
    error_code = "BOOKING_SERVICE_ERROR"


class BookingNotFoundError(BookingServiceError):
    """No booking matches the given number and customer name"""
    error_code = "BOOKING_NOT_FOUND"

    def __init__(self, booking_number: str):
        self.booking_number = booking_number
        super().__init__(f"Booking not found for booking number: {booking_number}")


class BookingPolicyViolationError(BookingServiceError):
    """A business rule blocks the requested change or cancellation"""
    error_code = "POLICY_VIOLATION"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
