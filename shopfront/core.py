from dependency_injector import containers, providers

from shopfront.application.customer.use_cases.register_customer_use_case import (
    RegisterCustomerUseCase,
)
from shopfront.application.order.services.order_service import OrderService, OrderServiceConfig
from shopfront.config import Settings, configure_logging, get_settings
from shopfront.infrastructure.customer.repositories.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Repositories. The in-memory store must outlive a single resolution.
    customer_repository = providers.Singleton(InMemoryCustomerRepository)

    # Customer module, application use cases
    register_customer_use_case = providers.Factory(
        RegisterCustomerUseCase,
        customer_repository=customer_repository,
    )

    # Order module, application services
    order_service_config = providers.Factory(
        OrderServiceConfig,
        customers=customer_repository,
    )
    order_service = providers.Factory(
        OrderService,
        config=order_service_config,
    )


def create_container(settings: Settings | None = None) -> Container:
    """Configure logging for the environment and build the container."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    return Container()
