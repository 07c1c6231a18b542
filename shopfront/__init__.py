"""shopfront: customer aggregate, repository contract and in-memory storage."""

__version__ = "0.1.0"
