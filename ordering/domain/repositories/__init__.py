"""Repository interfaces."""

from .order_repository import WarehouseOrderRepository
from .reference_repository import (
    ProductRepository,
    ProviderRepository,
    StoreRepository,
    StoreStockReportRepository,
    UserRepository,
    WarehouseRepository,
)

__all__ = [
    "ProductRepository",
    "ProviderRepository",
    "StoreRepository",
    "StoreStockReportRepository",
    "UserRepository",
    "WarehouseOrderRepository",
    "WarehouseRepository",
]
