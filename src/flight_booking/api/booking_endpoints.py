"""
Booking API endpoints.

Thin adapter over the booking service: path and query parameters are passed
through unchanged and domain errors propagate to the handlers registered in
``error_handlers``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query
import structlog

from ..container import container
from ..services import BookingService
from ..types import BookingChangeRequest, BookingView

logger = structlog.get_logger("booking_api")

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


def get_booking_service() -> BookingService:
    """Resolve the booking service from the global container"""
    return container.get_booking_service()


@router.get("", response_model=List[BookingView], response_model_by_alias=True)
async def list_bookings(service: BookingService = Depends(get_booking_service)):
    """List all bookings in store order"""
    return service.get_all_bookings()


@router.get("/{booking_number}", response_model=BookingView, response_model_by_alias=True)
async def get_booking(
    booking_number: str = Path(..., min_length=1),
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: BookingService = Depends(get_booking_service)
):
    """Get booking details for the given customer"""
    return service.get_booking_details(booking_number, first_name, last_name)


@router.put("/{booking_number}", response_model=BookingView, response_model_by_alias=True)
async def update_booking(
    request: BookingChangeRequest,
    booking_number: str = Path(..., min_length=1),
    service: BookingService = Depends(get_booking_service)
):
    """Change the flight date and route of a booking"""
    logger.info("Booking change requested", booking_number=booking_number)
    return service.change_booking(
        booking_number,
        request.first_name,
        request.last_name,
        request.new_flight_date,
        request.new_departure_airport,
        request.new_arrival_airport
    )


@router.delete("/{booking_number}", response_model=BookingView, response_model_by_alias=True)
async def cancel_booking(
    booking_number: str = Path(..., min_length=1),
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: BookingService = Depends(get_booking_service)
):
    """Cancel a booking"""
    logger.info("Booking cancellation requested", booking_number=booking_number)
    return service.cancel_booking(booking_number, first_name, last_name)
