"""
Base class for Value Objects.

A value object has no identity of its own. Two value objects are equal
when all of their attributes are equal, and they never change after
construction.

Example:
    @dataclass(frozen=True)
    class Money(ValueObject):
        amount: int
        currency: str
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses are decorated with @dataclass(frozen=True), which gives
    them value equality, hashing and immutability, and validate
    themselves in __post_init__.
    """

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python type for serialization.

        Single-attribute value objects collapse to that attribute,
        the rest become a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
