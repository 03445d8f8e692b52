"""Application DTOs for warehouse order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from ordering.domain.enums import OrderStatus


class ProductDTO(BaseModel):
    """DTO for a catalogue product."""

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    weight: Decimal = Field(..., description="Product weight")
    price: Decimal = Field(..., description="Current list price")

    model_config = {"frozen": True}


class PartyDTO(BaseModel):
    """DTO for a warehouse or provider reference."""

    id: int = Field(..., description="Entity ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")

    model_config = {"frozen": True}


class OrderItemRequest(BaseModel):
    """Line requested when placing an order."""

    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Optional[Decimal] = Field(
        None,
        ge=0,
        decimal_places=2,
        description="Unit price (defaults to the product's list price)",
    )

    model_config = {"frozen": True}


class CreateWarehouseOrderRequest(BaseModel):
    """Request DTO for placing a warehouse order."""

    warehouse_id: int = Field(..., description="Ordering warehouse ID")
    provider_id: int = Field(..., description="Provider ID")
    items: List[OrderItemRequest] = Field(default_factory=list, description="Order lines")
    note: str = Field(default="Order created", description="Initial revision note")

    model_config = {"frozen": True}


class ChangeStatusRequest(BaseModel):
    """Request DTO for moving an order to a new status."""

    status: OrderStatus = Field(..., description="New status")
    note: str = Field(default="", description="Revision note")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    product: ProductDTO
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., ge=0, description="Unit price at order time")
    line_total: Decimal = Field(..., ge=0, description="Quantity x unit price")

    model_config = {"frozen": True}


class OrderRevisionDTO(BaseModel):
    """DTO for an order revision."""

    id: int = Field(..., description="Revision ID")
    order_id: int = Field(..., description="Order ID")
    date: datetime = Field(..., description="Revision timestamp")
    status: OrderStatus = Field(..., description="Status recorded by the revision")
    note: str = Field(..., description="Revision note")

    model_config = {"frozen": True}


class OrderSummaryDTO(BaseModel):
    """Response DTO for list views (no items)."""

    id: int = Field(..., description="Order ID")
    date: datetime = Field(..., description="Order timestamp")
    status: OrderStatus = Field(..., description="Order status")
    warehouse: PartyDTO
    provider: PartyDTO

    model_config = {"frozen": True}


class OrderDTO(OrderSummaryDTO):
    """Response DTO for order details."""

    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    total_price: Decimal = Field(..., ge=0, description="Sum of line totals")
    revisions: Optional[List[OrderRevisionDTO]] = Field(
        None, description="Revision history (only when requested)"
    )
