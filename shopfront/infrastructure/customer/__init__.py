"""Customer infrastructure: storage adapters for the customer repository protocol."""
