"""
Error handling for the flight booking HTTP API
"""

import traceback
from typing import Dict, Any, Optional
from datetime import datetime
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from .types import BookingServiceError, BookingNotFoundError, BookingPolicyViolationError
from .services import audit_logger

logger = structlog.get_logger()


class ErrorCode:
    """Standard error codes for the booking service"""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    BOOKING_NOT_FOUND = BookingNotFoundError.error_code
    POLICY_VIOLATION = BookingPolicyViolationError.error_code
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"
    HTTP_ERROR = "HTTP_ERROR"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"


INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorHandler:
    """Centralized error response formatting"""

    @staticmethod
    def create_error_response(
        status_code: int,
        message: str,
        error_code: str,
        details: Optional[Any] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """Create standardized error response"""

        error_response = {
            "status": "error",
            "status_code": status_code,
            "message": message,
            "error_code": error_code,
            "timestamp": datetime.now().isoformat()
        }

        if details:
            error_response["details"] = details

        if request_id:
            error_response["request_id"] = request_id

        return error_response


class ExceptionMapper:
    """Map exceptions to appropriate HTTP responses"""

    @staticmethod
    def map_exception(exception: Exception, request_id: str = None) -> StarletteHTTPException:
        """Map domain exceptions to HTTP exceptions; anything else is opaque"""

        if isinstance(exception, StarletteHTTPException):
            return exception

        elif isinstance(exception, BookingNotFoundError):
            status_code = 404
            message = str(exception)
            error_code = ErrorCode.BOOKING_NOT_FOUND

        elif isinstance(exception, BookingPolicyViolationError):
            status_code = 400
            message = str(exception)
            error_code = ErrorCode.POLICY_VIOLATION

        else:
            status_code = 500
            message = INTERNAL_ERROR_MESSAGE
            error_code = ErrorCode.INTERNAL_ERROR

        return HTTPException(
            status_code=status_code,
            detail=ErrorHandler.create_error_response(
                status_code=status_code,
                message=message,
                error_code=error_code,
                request_id=request_id
            )
        )


async def booking_exception_handler(request: Request, exc: BookingServiceError) -> JSONResponse:
    """Handler for domain errors raised by the booking service"""

    request_id = getattr(request.state, 'request_id', None)

    logger.warning(
        "Booking request rejected",
        error_code=exc.error_code,
        error_message=str(exc),
        url=str(request.url),
        method=request.method,
        request_id=request_id
    )

    http_exception = ExceptionMapper.map_exception(exc, request_id)
    return JSONResponse(status_code=http_exception.status_code, content=http_exception.detail)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled exceptions"""

    request_id = getattr(request.state, 'request_id', None)

    logger.error(
        "Unexpected error occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        request_id=request_id,
        traceback="".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    audit_logger.log_error(
        error_type=type(exc).__name__,
        error_message=str(exc),
        error_code=ErrorCode.INTERNAL_ERROR,
        request_id=request_id,
        context={"url": str(request.url), "method": request.method}
    )

    http_exception = ExceptionMapper.map_exception(exc, request_id)
    return JSONResponse(status_code=http_exception.status_code, content=http_exception.detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handler for HTTP exceptions"""

    request_id = getattr(request.state, 'request_id', None)

    if isinstance(exc.detail, dict):
        content = dict(exc.detail)
        if request_id:
            content["request_id"] = request_id
    else:
        error_code = ErrorCode.ENDPOINT_NOT_FOUND if exc.status_code == 404 else ErrorCode.HTTP_ERROR
        content = ErrorHandler.create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            error_code=error_code,
            request_id=request_id
        )

    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for request validation exceptions"""

    request_id = getattr(request.state, 'request_id', None)

    logger.warning(
        "Request validation failed",
        error=str(exc),
        url=str(request.url),
        request_id=request_id
    )

    return JSONResponse(
        status_code=422,
        content=ErrorHandler.create_error_response(
            status_code=422,
            message="Request validation failed. Please check your input and try again.",
            error_code=ErrorCode.VALIDATION_ERROR,
            details=[
                {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                for error in exc.errors()
            ],
            request_id=request_id
        )
    )
