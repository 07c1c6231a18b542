"""Application service for orders."""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from shopfront.application.customer.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from shopfront.config import Settings, get_settings
from shopfront.exceptions import ConfigurationError
from shopfront.infrastructure.customer.repositories.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)

logger = structlog.get_logger(__name__)

CUSTOMER_REPOSITORY_BACKENDS: dict[str, Callable[[], CustomerRepositoryProtocol]] = {
    "memory": InMemoryCustomerRepository,
}


@dataclass(frozen=True)
class OrderServiceConfig:
    """Collaborators the order service is built from."""

    customers: CustomerRepositoryProtocol

    @classmethod
    def with_memory_customer_repository(cls) -> "OrderServiceConfig":
        """Configuration backed by a fresh in-memory customer repository."""
        return cls(customers=InMemoryCustomerRepository())

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "OrderServiceConfig":
        """
        Build the configuration named by application settings.

        Raises:
            ConfigurationError: If CUSTOMER_REPOSITORY names an unknown backend
        """
        settings = settings or get_settings()
        backend = CUSTOMER_REPOSITORY_BACKENDS.get(settings.CUSTOMER_REPOSITORY)
        if backend is None:
            raise ConfigurationError("CUSTOMER_REPOSITORY", settings.CUSTOMER_REPOSITORY)
        return cls(customers=backend())


class OrderService:
    """Application service coordinating orders for customers."""

    def __init__(self, config: OrderServiceConfig) -> None:
        """Initialize service from an explicit configuration."""
        self.customers = config.customers
        logger.debug("order_service_configured", customers=type(self.customers).__name__)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "OrderService":
        """Build the service with the backends selected in settings."""
        return cls(OrderServiceConfig.from_settings(settings))
