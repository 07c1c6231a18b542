from .item import Item
from .person import Person

__all__ = [
    "Item",
    "Person",
]
