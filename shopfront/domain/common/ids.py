from dataclasses import dataclass

from .entity import EntityId


@dataclass(frozen=True)
class PersonId(EntityId):
    """Strongly-typed person identifier. Doubles as the customer identifier."""


@dataclass(frozen=True)
class ItemId(EntityId):
    """Strongly-typed catalog item identifier."""
