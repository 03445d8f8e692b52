"""Store stock report entities."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .parties import Store
from .product import Product


@dataclass(frozen=True)
class StoreStockReportItem:
    product: Product
    quantity: int


@dataclass
class StoreStockReport:
    """Snapshot of a store's stock levels at a point in time."""
    store: Store
    date: datetime
    items: List[StoreStockReportItem] = field(default_factory=list)
    id: Optional[int] = None

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def __str__(self) -> str:
        return f"Report #{self.id} ({self.date:%Y-%m-%d %H:%M})"
