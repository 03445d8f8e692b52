"""Domain entities."""

from .order import (
    OrderDetail,
    OrderDraft,
    OrderHeader,
    OrderItem,
    OrderRevision,
    OrderSummary,
    calculate_total_price,
)
from .parties import Address, Provider, Store, User, Warehouse
from .product import Product
from .stock_report import StoreStockReport, StoreStockReportItem

__all__ = [
    "Address",
    "OrderDetail",
    "OrderDraft",
    "OrderHeader",
    "OrderItem",
    "OrderRevision",
    "OrderSummary",
    "Product",
    "Provider",
    "Store",
    "StoreStockReport",
    "StoreStockReportItem",
    "User",
    "Warehouse",
    "calculate_total_price",
]
