"""Warehouse, provider, product and store endpoints for REST API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ordering.application.dtos import OrderSummaryDTO, ProductDTO, StockReportDTO
from ordering.application.services import (
    CatalogService,
    StockReportService,
    WarehouseOrderService,
)

from apps.api.deps import get_catalog_service, get_order_service, get_stock_report_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["catalog"])


@router.get("/warehouses/{warehouse_id}/orders", response_model=List[OrderSummaryDTO])
async def list_warehouse_orders(
    warehouse_id: int,
    service: WarehouseOrderService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    orders = await service.list_orders_for_warehouse(warehouse_id)
    if orders is None:
        raise HTTPException(status_code=404, detail=f"Warehouse {warehouse_id} not found")
    return orders


@router.get("/providers/{provider_id}/orders", response_model=List[OrderSummaryDTO])
async def list_provider_orders(
    provider_id: int,
    service: WarehouseOrderService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    orders = await service.list_orders_for_provider(provider_id)
    if orders is None:
        raise HTTPException(status_code=404, detail=f"Provider {provider_id} not found")
    return orders


@router.get("/products", response_model=List[ProductDTO])
async def list_products(
    service: CatalogService = Depends(get_catalog_service),
) -> List[ProductDTO]:
    return await service.list_products()


@router.get("/stores/{store_id}/stock-reports", response_model=List[StockReportDTO])
async def list_stock_reports(
    store_id: int,
    service: StockReportService = Depends(get_stock_report_service),
) -> List[StockReportDTO]:
    """Stock reports of a store, newest first."""
    reports = await service.reports_for_store(store_id)
    if reports is None:
        raise HTTPException(status_code=404, detail=f"Store {store_id} not found")
    return reports
