"""
Services module initialization
"""

from .audit_logger import AuditLogger, AuditEventType, audit_logger
from .booking_store import BookingStore
from .booking_service import BookingService, CHANGE_LEAD_DAYS, CANCEL_LEAD_DAYS
from .booking_tools import BookingTools, TOOL_DESCRIPTIONS

__all__ = [
    'AuditLogger',
    'AuditEventType',
    'audit_logger',
    'BookingStore',
    'BookingService',
    'CHANGE_LEAD_DAYS',
    'CANCEL_LEAD_DAYS',
    'BookingTools',
    'TOOL_DESCRIPTIONS',
]
