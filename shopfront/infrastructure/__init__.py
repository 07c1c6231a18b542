"""
Infrastructure layer.

Concrete adapters for the protocols declared by the application layer.
"""
