from .base import TimestampMixin, UUIDMixin
from .master import Warehouse, Resource
from .order import Order, OrderItem
from .stock import Stock, StockMovement, MovementKind

__all__ = [
    # Base
    "TimestampMixin", "UUIDMixin",
    # Master
    "Warehouse", "Resource",
    # Order
    "Order", "OrderItem",
    # Stock
    "Stock", "StockMovement", "MovementKind",
]
