"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from shopfront.config import get_settings
from shopfront.domain.customer.customer import Customer
from shopfront.infrastructure.customer.repositories.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> InMemoryCustomerRepository:
    """Create an empty in-memory customer repository."""
    return InMemoryCustomerRepository()


@pytest.fixture
def customer() -> Customer:
    """Create a valid customer named ted."""
    return Customer.create("ted")
