"""Application services."""

from .catalog_service import CatalogService, StockReportService
from .order_service import WarehouseOrderService

__all__ = ["CatalogService", "StockReportService", "WarehouseOrderService"]
