"""Domain layer - pure domain models and interfaces."""

from .entities import (
    OrderDetail,
    OrderDraft,
    OrderItem,
    OrderRevision,
    OrderSummary,
    Product,
    Provider,
    Store,
    Warehouse,
)
from .enums import OrderStatus
from .exceptions import ControlError, DataAccessError
from .repositories import WarehouseOrderRepository

__all__ = [
    "ControlError",
    "DataAccessError",
    "OrderDetail",
    "OrderDraft",
    "OrderItem",
    "OrderRevision",
    "OrderStatus",
    "OrderSummary",
    "Product",
    "Provider",
    "Store",
    "Warehouse",
    "WarehouseOrderRepository",
]
