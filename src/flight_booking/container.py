"""
Dependency injection container for flight booking components
"""

import random
from datetime import date
from typing import Any, Callable, Dict, Optional

import structlog

from .config import config
from .services import AuditLogger, BookingService, BookingStore, BookingTools, audit_logger

logger = structlog.get_logger()


class ServiceContainer:
    """
    Dependency injection container for managing service instances and their dependencies
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._initialized = False

    def initialize(
        self,
        today: Callable[[], date] = date.today,
        audit: Optional[AuditLogger] = None,
        seed_demo_data: Optional[bool] = None
    ):
        """Build the store, seed it and wire the services on top"""
        if self._initialized:
            return

        logger.info("Initializing service container")

        if seed_demo_data is None:
            seed_demo_data = config.demo_data.enabled

        store = BookingStore()
        if seed_demo_data:
            rng = random.Random(config.demo_data.random_seed)
            store.seed_demo_data(today=today(), rng=rng)

        audit = audit or audit_logger
        service = BookingService(store, audit=audit, today=today)

        self._services['booking_store'] = store
        self._services['audit_logger'] = audit
        self._services['booking_service'] = service
        self._services['booking_tools'] = BookingTools(service)

        self._initialized = True
        logger.info(
            "Service container initialized successfully",
            service_count=len(self._services),
            booking_count=store.count()
        )

    def is_initialized(self) -> bool:
        return self._initialized

    def get_service(self, service_name: str) -> Any:
        """Get a service by name"""
        if not self._initialized:
            raise RuntimeError("Container not initialized. Call initialize() first.")

        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found in container")

        return self._services[service_name]

    def get_booking_store(self) -> BookingStore:
        """Get the booking store"""
        return self.get_service('booking_store')

    def get_booking_service(self) -> BookingService:
        """Get the booking policy service"""
        return self.get_service('booking_service')

    def get_booking_tools(self) -> BookingTools:
        """Get the agent-facing booking tools"""
        return self.get_service('booking_tools')

    def cleanup(self):
        """Drop all services; in-memory bookings are discarded"""
        if not self._initialized:
            return

        logger.info("Cleaning up service container")
        self._services.clear()
        self._initialized = False


def configure_environment():
    """Log the environment the services are configured for"""
    env = config.server.environment.lower()

    if env in ("development", "production", "testing"):
        logger.info("Configuring services", environment=env)
    else:
        logger.warning("Unknown environment, using development configuration", environment=env)


# Global container instance
container = ServiceContainer()
