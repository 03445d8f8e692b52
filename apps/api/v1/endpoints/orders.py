"""Warehouse order endpoints for REST API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ordering.application.dtos import (
    ChangeStatusRequest,
    CreateWarehouseOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderRevisionDTO,
    OrderSummaryDTO,
)
from ordering.application.services import WarehouseOrderService

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(
    request: CreateWarehouseOrderRequest,
    service: WarehouseOrderService = Depends(get_order_service),
) -> OrderDTO:
    """Place a warehouse order.

    Args:
        request: CreateWarehouseOrderRequest DTO
        service: WarehouseOrderService instance

    Returns:
        OrderDTO with created order details (including its first revision)
    """
    return await service.place_order(request)


@router.get("", response_model=List[OrderSummaryDTO])
async def list_orders(
    service: WarehouseOrderService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    """List all orders (header only, no items)."""
    return await service.list_orders()


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: int,
    include_revisions: bool = Query(default=False, description="Include revision history"),
    service: WarehouseOrderService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Raises:
        HTTPException: If order not found
    """
    order = await service.get_order(order_id, include_revisions=include_revisions)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order


@router.delete("/{order_id}", status_code=204)
async def delete_order(
    order_id: int,
    service: WarehouseOrderService = Depends(get_order_service),
) -> Response:
    if not await service.delete_order(order_id):
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return Response(status_code=204)


@router.get("/{order_id}/items", response_model=List[OrderItemDTO])
async def get_order_items(
    order_id: int,
    service: WarehouseOrderService = Depends(get_order_service),
) -> List[OrderItemDTO]:
    items = await service.get_order_items(order_id)
    if items is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return items


@router.get("/{order_id}/revisions", response_model=List[OrderRevisionDTO])
async def get_order_revisions(
    order_id: int,
    service: WarehouseOrderService = Depends(get_order_service),
) -> List[OrderRevisionDTO]:
    revisions = await service.get_order_revisions(order_id)
    if revisions is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return revisions


@router.post("/{order_id}/status", response_model=OrderDTO)
async def change_order_status(
    order_id: int,
    request: ChangeStatusRequest,
    service: WarehouseOrderService = Depends(get_order_service),
) -> OrderDTO:
    """Move an order to a new status, recording a revision."""
    order = await service.change_status(order_id, request)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order
