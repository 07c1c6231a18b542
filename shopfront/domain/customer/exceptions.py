"""Customer module domain exceptions."""

from shopfront.domain.common.exceptions import DomainError, EntityNotFoundError, ValidationError


class InvalidPersonError(ValidationError):
    """Raised when a customer is created without a valid name."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__("a customer has to have a valid name", field="name", value=name)


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when a customer cannot be found in a repository."""

    def __init__(self, customer_id: object) -> None:
        super().__init__("Customer", customer_id)


class FailedToAddCustomerError(DomainError):
    """Raised when a repository refuses to add a customer."""


class CustomerAlreadyExistsError(FailedToAddCustomerError):
    """Raised when adding a customer whose id is already stored."""

    def __init__(self, customer_id: object) -> None:
        super().__init__(
            f"customer already exists: {customer_id}", {"customer_id": customer_id}
        )
        self.customer_id = customer_id


class FailedToUpdateCustomerError(DomainError):
    """Raised when a repository refuses to update a customer."""


class CustomerDoesNotExistError(FailedToUpdateCustomerError):
    """Raised when updating a customer whose id was never stored."""

    def __init__(self, customer_id: object) -> None:
        super().__init__(
            f"customer does not exist: {customer_id}", {"customer_id": customer_id}
        )
        self.customer_id = customer_id
