"""Tests for the Customer aggregate."""

from uuid import uuid4

import pytest

from shopfront.domain.common.exceptions import DomainError, ValidationError
from shopfront.domain.common.ids import PersonId
from shopfront.domain.customer.customer import Customer
from shopfront.domain.customer.entities.item import Item
from shopfront.domain.customer.events import CustomerCreated
from shopfront.domain.customer.exceptions import InvalidPersonError
from shopfront.domain.customer.transaction import Transaction


class TestCreateCustomer:
    """Test suite for the customer factory."""

    def test_create_with_valid_name(self) -> None:
        customer = Customer.create("ted")
        assert customer.name == "ted"
        assert isinstance(customer.id, PersonId)
        assert customer.items == ()
        assert customer.transactions == ()

    def test_create_with_age(self) -> None:
        customer = Customer.create("ted", age=42)
        assert customer.age == 42

    def test_create_with_empty_name_fails(self) -> None:
        with pytest.raises(InvalidPersonError) as exc_info:
            Customer.create("")
        assert exc_info.value.field == "name"
        assert exc_info.value.message == "a customer has to have a valid name"

    def test_invalid_person_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Customer.create("")
        with pytest.raises(DomainError):
            Customer.create("")

    @pytest.mark.parametrize("name", ["ted", " ", "a", "Percy Bolmér"])
    def test_any_non_empty_name_is_accepted(self, name: str) -> None:
        assert Customer.create(name).name == name

    def test_each_customer_gets_a_new_id(self) -> None:
        first = Customer.create("ted")
        second = Customer.create("ted")
        assert first.id != second.id

    def test_create_records_event(self) -> None:
        customer = Customer.create("ted")
        events = customer.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], CustomerCreated)
        assert events[0].customer_id == customer.id
        assert events[0].name == "ted"
        assert customer.pending_events == []

    def test_created_event_serializes(self) -> None:
        customer = Customer.create("ted")
        payload = customer.pending_events[0].to_dict()
        assert payload["event_type"] == "CustomerCreated"
        assert payload["customer_id"] == str(customer.id)
        assert payload["name"] == "ted"


class TestCreateWithId:
    """Test suite for reconstituting customers from storage."""

    def test_create_with_id(self) -> None:
        customer_id = PersonId.generate()
        item = Item.create("beer", "a cold one")
        customer = Customer.create_with_id(id=customer_id, name="ted", age=30, items=[item])

        assert customer.id == customer_id
        assert customer.name == "ted"
        assert customer.age == 30
        assert customer.items == (item,)

    def test_create_with_id_records_no_event(self) -> None:
        customer = Customer.create_with_id(id=PersonId.generate(), name="ted")
        assert customer.pending_events == []


class TestRestore:
    """Test suite for administrative restore operations."""

    def test_restore_id(self, customer: Customer) -> None:
        new_id = PersonId.generate()
        customer.restore_id(new_id)
        assert customer.id == new_id

    def test_restore_name(self, customer: Customer) -> None:
        customer.restore_name("percy")
        assert customer.name == "percy"

    def test_restore_name_skips_validation(self, customer: Customer) -> None:
        customer.restore_name("")
        assert customer.name == ""


class TestCollections:
    """Test suite for items and transactions."""

    def test_add_item_keeps_order(self, customer: Customer) -> None:
        beer = Item.create("beer")
        peanuts = Item.create("peanuts", "salted")
        customer.add_item(beer)
        customer.add_item(peanuts)
        assert customer.items == (beer, peanuts)

    def test_add_transaction(self, customer: Customer) -> None:
        transaction = Transaction(amount=-15, source_id=customer.id.value, destination_id=uuid4())
        customer.add_transaction(transaction)
        assert customer.transactions == (transaction,)

    def test_items_view_is_read_only(self, customer: Customer) -> None:
        items = customer.items
        assert isinstance(items, tuple)
        customer.add_item(Item.create("beer"))
        assert items == ()


class TestEquality:
    """Customers compare by their full state."""

    def test_same_state_is_equal(self) -> None:
        customer_id = PersonId.generate()
        first = Customer.create_with_id(id=customer_id, name="ted")
        second = Customer.create_with_id(id=customer_id, name="ted")
        assert first == second

    def test_different_name_is_not_equal(self) -> None:
        customer_id = PersonId.generate()
        first = Customer.create_with_id(id=customer_id, name="ted")
        second = Customer.create_with_id(id=customer_id, name="percy")
        assert first != second

    def test_different_item_state_is_not_equal(self) -> None:
        customer_id = PersonId.generate()
        first = Customer.create_with_id(id=customer_id, name="ted", items=[Item.create("beer")])
        second = Customer.create_with_id(id=customer_id, name="ted")
        assert first != second

    def test_is_not_hashable(self, customer: Customer) -> None:
        with pytest.raises(TypeError):
            hash(customer)

    def test_pending_events_do_not_affect_equality(self, customer: Customer) -> None:
        copy = Customer.create_with_id(id=customer.id, name=customer.name)
        assert customer.pending_events
        assert customer == copy
