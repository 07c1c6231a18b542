"""
Base class for Entities.

Entities carry an identity that stays the same while their attributes
change. Identifiers are strongly typed so ids of different entities
cannot be mixed up.

Example:
    @dataclass(eq=False)
    class Person(Entity[PersonId]):
        id: PersonId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Every id wraps a UUID. Fresh ids come from ``generate()`` which draws
    a random (version 4) UUID, so ids are unique without coordination.

    Example:
        @dataclass(frozen=True)
        class PersonId(EntityId):
            pass

        person_id = PersonId.generate()
        item_id = ItemId(person_id.value)
        # Same UUID, different types: person_id != item_id
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Allocate a new, globally unique id."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build an id from its canonical string form."""
        return cls(UUID(raw))

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Two entities are equal when they are of the same type and share an id,
    whatever their other attributes hold. Subclasses must expose an ``id``
    of type IdType and, when they are dataclasses, be declared with
    ``eq=False`` so this comparison is not replaced by a field-by-field one.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
