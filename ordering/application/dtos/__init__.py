"""Application DTOs."""

from .order_dto import (
    ChangeStatusRequest,
    CreateWarehouseOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderItemRequest,
    OrderRevisionDTO,
    OrderSummaryDTO,
    PartyDTO,
    ProductDTO,
)
from .stock_report_dto import StockReportDTO, StockReportItemDTO

__all__ = [
    "ChangeStatusRequest",
    "CreateWarehouseOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "OrderRevisionDTO",
    "OrderSummaryDTO",
    "PartyDTO",
    "ProductDTO",
    "StockReportDTO",
    "StockReportItemDTO",
]
