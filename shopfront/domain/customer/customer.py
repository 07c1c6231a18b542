"""
Customer aggregate.

The customer is the root of a cluster made of one person, the items the
customer references and the transactions the customer took part in.
The person's id is the customer's id.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from shopfront.domain.common.aggregate_root import AggregateRoot
from shopfront.domain.common.ids import PersonId
from shopfront.domain.customer.entities.item import Item
from shopfront.domain.customer.entities.person import Person
from shopfront.domain.customer.events import CustomerCreated
from shopfront.domain.customer.exceptions import InvalidPersonError
from shopfront.domain.customer.transaction import Transaction


@dataclass(eq=False)
class Customer(AggregateRoot[PersonId]):
    """
    Customer aggregate root.

    Business Rules:
    - A customer always has a non-empty name once created through ``create``
    - The id is fixed at creation; ``restore_id`` exists for rehydration only
    - Items and transactions are append-only and keep insertion order

    Build instances with ``create`` (new customers) or ``create_with_id``
    (customers coming back from storage). The owned person, items and
    transactions are reached through properties, not through fields.
    """

    _person: Person
    _items: list[Item] = field(default_factory=list)
    _transactions: list[Transaction] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        # Full state, not just the id; pending events are ignored.
        if not isinstance(other, Customer):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def _state(self) -> tuple[object, ...]:
        person = self._person
        return (person.id, person.name, person.age, self._items, self._transactions)

    @property
    def id(self) -> PersonId:  # type: ignore[override]
        return self._person.id

    @property
    def name(self) -> str:
        return self._person.name

    @property
    def age(self) -> int:
        return self._person.age

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def add_item(self, item: Item) -> None:
        """Reference a catalog item from this customer."""
        self._items.append(item)

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the customer's history."""
        self._transactions.append(transaction)

    def restore_id(self, customer_id: PersonId) -> None:
        """
        Reassign the customer id.

        Administrative operation for rehydrating a customer from storage.
        It is not a domain mutation and records no event.
        """
        self._person.id = customer_id

    def restore_name(self, name: str) -> None:
        """
        Overwrite the customer name without validation.

        Like ``restore_id`` this is meant for rehydration. It does not check
        the non-empty name rule that ``create`` enforces, so it can put the
        aggregate in a state ``create`` would have refused.
        """
        self._person.name = name

    @classmethod
    def create(cls, name: str, age: int = 0) -> "Customer":
        """
        Create a new customer.

        Args:
            name: Customer name, must not be empty
            age: Customer age

        Returns:
            New Customer with a fresh id and no items or transactions

        Raises:
            InvalidPersonError: If name is empty
        """
        if not name:
            raise InvalidPersonError(name)

        customer = cls(_person=Person(id=PersonId.generate(), name=name, age=age))
        customer._record_event(CustomerCreated(customer_id=customer.id, name=name))
        return customer

    @classmethod
    def create_with_id(
        cls,
        id: PersonId,
        name: str,
        age: int = 0,
        items: Iterable[Item] = (),
        transactions: Iterable[Transaction] = (),
    ) -> "Customer":
        """Reconstitute a customer from persistence."""
        return cls(
            _person=Person(id=id, name=name, age=age),
            _items=list(items),
            _transactions=list(transactions),
        )
