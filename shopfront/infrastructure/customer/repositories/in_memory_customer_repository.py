"""In-memory repository for Customer aggregates."""

import copy
import logging
import threading

from shopfront.domain.common.ids import PersonId
from shopfront.domain.customer.customer import Customer
from shopfront.domain.customer.exceptions import (
    CustomerAlreadyExistsError,
    CustomerDoesNotExistError,
    CustomerNotFoundError,
)

logger = logging.getLogger(__name__)


class InMemoryCustomerRepository:
    """
    Thread-safe customer store backed by a dict.

    Every operation checks for the id and acts on the result while holding
    the same lock, so two concurrent ``add`` calls for one id can never
    both succeed. Customers are deep-copied on the way in and on the way
    out; callers never share state with the store. Pending domain events
    are not stored: a customer read back from the store has none.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._customers: dict[PersonId, Customer] = {}

    def get(self, customer_id: PersonId) -> Customer:
        """
        Find a customer by id.

        Args:
            customer_id: The customer id

        Returns:
            A copy of the stored customer

        Raises:
            CustomerNotFoundError: If no customer has this id
        """
        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)
            return copy.deepcopy(customer)

    def add(self, customer: Customer) -> None:
        """
        Store a new customer.

        Args:
            customer: The customer to store

        Raises:
            CustomerAlreadyExistsError: If a customer with the same id is stored
        """
        with self._lock:
            if customer.id in self._customers:
                raise CustomerAlreadyExistsError(customer.id)
            self._customers[customer.id] = _snapshot(customer)
        logger.debug(f"Added customer {customer.id}")

    def update(self, customer: Customer) -> None:
        """
        Replace a stored customer.

        Args:
            customer: The new state of the customer

        Raises:
            CustomerDoesNotExistError: If no customer with this id is stored
        """
        with self._lock:
            if customer.id not in self._customers:
                raise CustomerDoesNotExistError(customer.id)
            self._customers[customer.id] = _snapshot(customer)
        logger.debug(f"Updated customer {customer.id}")

    def __contains__(self, customer_id: object) -> bool:
        with self._lock:
            return customer_id in self._customers

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)


def _snapshot(customer: Customer) -> Customer:
    """Copy a customer for storage, leaving its pending events behind."""
    stored = copy.deepcopy(customer)
    stored.collect_events()
    return stored
