"""
Audit logging service for the flight booking system.

Records every booking lookup, change, cancellation and policy rejection as a
structured event. Customer names are masked; events are keyed by booking
number only.
"""

import structlog
from typing import Any, Dict, Optional
from datetime import date, datetime
from enum import Enum

from ..config import config


class AuditEventType(str, Enum):
    """Types of audit events"""
    BOOKING_LOOKUP = "booking_lookup"
    BOOKING_NOT_FOUND = "booking_not_found"
    BOOKING_CHANGED = "booking_changed"
    BOOKING_CANCELLED = "booking_cancelled"
    POLICY_VIOLATION = "policy_violation"
    ERROR_OCCURRED = "error_occurred"


class AuditLogger:
    """
    Service for audit logging with PII protection and structured logging.
    """

    def __init__(self, enabled: Optional[bool] = None):
        """Initialize the audit logger."""
        self.logger = structlog.get_logger("audit")
        self.enabled = config.logging.enable_audit if enabled is None else enabled

        # PII fields that should be masked
        self.pii_fields = {
            'first_name', 'last_name', 'firstname', 'lastname', 'name', 'customer_name'
        }

    def log_booking_lookup(self, booking_number: str, found: bool) -> None:
        """Log a booking lookup and whether it matched"""
        if not self.enabled:
            return

        event_type = AuditEventType.BOOKING_LOOKUP if found else AuditEventType.BOOKING_NOT_FOUND
        self.logger.info(
            "Booking lookup",
            event_type=event_type,
            booking_number=booking_number,
            found=found,
            timestamp=datetime.now().isoformat()
        )

    def log_booking_changed(
        self,
        booking_number: str,
        old_date: date,
        new_date: date,
        departure: str,
        arrival: str
    ) -> None:
        """
        Log a successful booking change.

        Args:
            booking_number: Booking reference
            old_date: Flight date before the change
            new_date: Flight date after the change
            departure: New departure airport
            arrival: New arrival airport
        """
        if not self.enabled:
            return

        self.logger.info(
            "Booking changed",
            event_type=AuditEventType.BOOKING_CHANGED,
            booking_number=booking_number,
            old_date=old_date.isoformat(),
            new_date=new_date.isoformat(),
            departure=departure,
            arrival=arrival,
            timestamp=datetime.now().isoformat()
        )

    def log_booking_cancelled(self, booking_number: str, flight_date: date) -> None:
        """Log a successful cancellation"""
        if not self.enabled:
            return

        self.logger.info(
            "Booking cancelled",
            event_type=AuditEventType.BOOKING_CANCELLED,
            booking_number=booking_number,
            flight_date=flight_date.isoformat(),
            timestamp=datetime.now().isoformat()
        )

    def log_policy_violation(self, booking_number: str, operation: str, reason: str) -> None:
        """
        Log a rejected change or cancellation.

        Args:
            booking_number: Booking reference
            operation: "change" or "cancel"
            reason: User-facing rejection reason
        """
        if not self.enabled:
            return

        self.logger.warning(
            "Booking policy violation",
            event_type=AuditEventType.POLICY_VIOLATION,
            booking_number=booking_number,
            operation=operation,
            reason=reason,
            timestamp=datetime.now().isoformat()
        )

    def log_error(
        self,
        error_type: str,
        error_message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None
    ) -> None:
        """Log system errors with sanitized context."""
        if not self.enabled:
            return

        sanitized_context = self._sanitize_data(context) if context else None

        self.logger.error(
            "System error occurred",
            event_type=AuditEventType.ERROR_OCCURRED,
            request_id=request_id,
            error_type=error_type,
            error_message=error_message,
            error_code=error_code,
            context=sanitized_context,
            timestamp=datetime.now().isoformat()
        )

    def _sanitize_data(self, data: Any) -> Any:
        """Recursively mask customer name fields."""
        if isinstance(data, dict):
            sanitized = {}
            for key, value in data.items():
                normalized_key = str(key).lower()
                if normalized_key in self.pii_fields:
                    sanitized[key] = f"[MASKED_{normalized_key.upper()}]"
                else:
                    sanitized[key] = self._sanitize_data(value)
            return sanitized

        elif isinstance(data, list):
            return [self._sanitize_data(item) for item in data]

        else:
            return data


# Global audit logger instance
audit_logger = AuditLogger()
