"""
Transaction value object.

Records money moving between two parties. A transaction has no id:
two transactions with the same amount, parties and timestamp are the
same transaction.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from shopfront.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Transaction(ValueObject):
    """
    Immutable payment record.

    A positive amount moves money from ``source_id`` to ``destination_id``,
    a negative amount moves it the other way.
    """

    amount: int
    source_id: UUID
    destination_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError("Transaction amount must be an integer")
