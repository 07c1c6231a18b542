"""
Application layer.

Orchestrates domain objects. Use cases depend on repository protocols;
only service configuration (``OrderServiceConfig``) names a concrete
storage backend.
"""
