"""Customer domain events."""

from dataclasses import dataclass

from shopfront.domain.common.domain_event import DomainEvent
from shopfront.domain.common.ids import PersonId


@dataclass(frozen=True, kw_only=True)
class CustomerCreated(DomainEvent):
    """A new customer came into existence through the factory."""

    customer_id: PersonId
    name: str
