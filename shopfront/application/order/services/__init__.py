from .order_service import OrderService, OrderServiceConfig

__all__ = [
    "OrderService",
    "OrderServiceConfig",
]
