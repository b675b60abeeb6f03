"""
HTTP API routers
"""

from .booking_endpoints import router as booking_router, get_booking_service

__all__ = [
    "booking_router",
    "get_booking_service",
]
