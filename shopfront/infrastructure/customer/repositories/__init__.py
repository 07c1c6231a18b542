from .in_memory_customer_repository import InMemoryCustomerRepository

__all__ = [
    "InMemoryCustomerRepository",
]
