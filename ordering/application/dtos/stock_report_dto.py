"""Application DTOs for store stock reports."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from .order_dto import ProductDTO


class StockReportItemDTO(BaseModel):
    product: ProductDTO
    quantity: int = Field(..., ge=0, description="Quantity in stock")

    model_config = {"frozen": True}


class StockReportDTO(BaseModel):
    """DTO for one store stock report."""

    id: int = Field(..., description="Report ID")
    store_id: int = Field(..., description="Store ID")
    date: datetime = Field(..., description="Report timestamp")
    items: List[StockReportItemDTO] = Field(default_factory=list)

    model_config = {"frozen": True}
