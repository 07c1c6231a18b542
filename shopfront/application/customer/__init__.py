"""Customer application layer."""
