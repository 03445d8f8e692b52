"""ORM models."""

from .base import Base
from .order_model import (
    WarehouseOrderItemModel,
    WarehouseOrderModel,
    WarehouseOrderRevisionModel,
)
from .reference_models import (
    AddressModel,
    ProductModel,
    ProviderModel,
    StoreModel,
    WarehouseModel,
)
from .stock_report_model import StoreStockReportItemModel, StoreStockReportModel

__all__ = [
    "AddressModel",
    "Base",
    "ProductModel",
    "ProviderModel",
    "StoreModel",
    "StoreStockReportItemModel",
    "StoreStockReportModel",
    "WarehouseModel",
    "WarehouseOrderItemModel",
    "WarehouseOrderModel",
    "WarehouseOrderRevisionModel",
]
