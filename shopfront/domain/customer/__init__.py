"""
Customer bounded context - Domain layer.

Aggregates:
- Customer: root over a Person, referenced Items and Transactions
"""

from .customer import Customer
from .entities import Item, Person
from .events import CustomerCreated
from .exceptions import (
    CustomerAlreadyExistsError,
    CustomerDoesNotExistError,
    CustomerNotFoundError,
    FailedToAddCustomerError,
    FailedToUpdateCustomerError,
    InvalidPersonError,
)
from .transaction import Transaction

__all__ = [
    "Customer",
    "CustomerAlreadyExistsError",
    "CustomerCreated",
    "CustomerDoesNotExistError",
    "CustomerNotFoundError",
    "FailedToAddCustomerError",
    "FailedToUpdateCustomerError",
    "InvalidPersonError",
    "Item",
    "Person",
    "Transaction",
]
