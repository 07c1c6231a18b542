"""Person entity."""

from dataclasses import dataclass

from shopfront.domain.common.entity import Entity
from shopfront.domain.common.ids import PersonId


@dataclass(eq=False)
class Person(Entity[PersonId]):
    """
    A person known to the shop.

    The id is assigned once at creation and never changes as a domain
    operation. Name validation belongs to the aggregate that owns the person.
    """

    id: PersonId
    name: str
    age: int = 0
