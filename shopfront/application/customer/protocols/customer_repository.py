from typing import Protocol

from shopfront.domain.common.ids import PersonId
from shopfront.domain.customer.customer import Customer


class CustomerRepositoryProtocol(Protocol):
    """
    Identity-keyed storage for Customer aggregates.

    Implementations keep at most one customer per id. ``get`` hands back
    a copy, so changes made by the caller only reach storage through
    ``update``.
    """

    def get(self, customer_id: PersonId) -> Customer:
        """Raises CustomerNotFoundError if no customer has this id."""
        ...

    def add(self, customer: Customer) -> None:
        """Raises FailedToAddCustomerError if the id is already stored."""
        ...

    def update(self, customer: Customer) -> None:
        """Raises FailedToUpdateCustomerError if the id is not stored."""
        ...
