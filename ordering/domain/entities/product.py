"""Product entity."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """
    Catalogue product.

    `price` is the current list price. Order items keep their own unit
    price, so changing it never alters existing orders.
    """
    name: str
    weight: Decimal
    price: Decimal
    id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.weight, Decimal):
            self.weight = Decimal(str(self.weight))
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
