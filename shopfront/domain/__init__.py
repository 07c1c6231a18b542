"""
Domain layer.

Business rules for customers and the shared building blocks they are
made of. Nothing here imports frameworks or storage code.

- common: Entity, ValueObject, AggregateRoot, DomainEvent, typed ids, errors
- customer: the Customer aggregate and what it owns
"""
