"""Item entity for the product catalog."""

from dataclasses import dataclass

from shopfront.domain.common.entity import Entity
from shopfront.domain.common.ids import ItemId


@dataclass(eq=False)
class Item(Entity[ItemId]):
    """
    Catalog item.

    Items have their own lifecycle. Customers reference them but do not
    own them, so nothing cascades from a customer to its items.
    """

    id: ItemId
    name: str
    description: str = ""

    @classmethod
    def create(cls, name: str, description: str = "") -> "Item":
        """Create a new item with a freshly generated id."""
        return cls(id=ItemId.generate(), name=name, description=description)
