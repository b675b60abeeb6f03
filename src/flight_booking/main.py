"""
Main application entry point
"""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from . import __version__
from .config import config
from .types import BookingServiceError
from .api import booking_router
from .container import container, configure_environment
from .error_handlers import (
    booking_exception_handler, global_exception_handler,
    http_exception_handler, validation_exception_handler
)
from .utils.logger import setup_logging


setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("Starting Flight Booking API", version=__version__)

    configure_environment()

    try:
        container.initialize()
    except Exception as e:
        logger.error("Failed to initialize service container", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Flight Booking API")
    container.cleanup()


# Create FastAPI application
app = FastAPI(
    title="Flight Booking API",
    description="Flight booking records with time-windowed change and cancellation policy",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if config.server.debug else None,
    redoc_url="/redoc" if config.server.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if config.is_development else [],
    allow_credentials=True,
    allow_methods=["GET", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(booking_router)

app.add_exception_handler(BookingServiceError, booking_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)


@app.get("/health")
async def health_check():
    """
    Health check endpoint

    Reports service status and the number of bookings held in memory
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "environment": config.server.environment,
    }

    if container.is_initialized():
        health_status["booking_count"] = container.get_booking_store().count()
    else:
        health_status["status"] = "degraded"
        health_status["message"] = "Service container not initialized"

    return health_status


@app.middleware("http")
async def log_requests(request, call_next):
    """Log all HTTP requests and tag them with a request ID"""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start_time = datetime.now()

    logger.info(
        "HTTP request started",
        request_id=request_id,
        method=request.method,
        url=str(request.url),
    )

    response = await call_next(request)

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(
        "HTTP request completed",
        request_id=request_id,
        status_code=response.status_code,
        duration_ms=int(duration * 1000)
    )

    response.headers["X-Request-ID"] = request_id
    return response


def main():
    """Main entry point"""
    uvicorn.run(
        "flight_booking.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.is_development,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
