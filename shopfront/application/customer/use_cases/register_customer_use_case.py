"""Use case for customer registration."""

import structlog

from shopfront.application.customer.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from shopfront.domain.customer.customer import Customer

logger = structlog.get_logger(__name__)


class RegisterCustomerUseCase:
    """Use case for registering new customers."""

    def __init__(self, customer_repository: CustomerRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.customer_repository = customer_repository

    def register_customer(self, name: str, age: int = 0) -> Customer:
        """
        Register a new customer.

        Args:
            name: Customer name
            age: Customer age

        Returns:
            The stored customer

        Raises:
            InvalidPersonError: If name is empty
            FailedToAddCustomerError: If the repository already holds the id
        """
        customer = Customer.create(name=name, age=age)
        events = customer.collect_events()
        self.customer_repository.add(customer)

        for event in events:
            logger.info("customer_registered", **event.to_dict())

        return customer
