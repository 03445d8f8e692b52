"""
Warehouse order aggregate.

An order exists in two loaded shapes:

- OrderSummary: header only, as returned by list queries
- OrderDetail: header plus line items, as returned by a lookup by id

Summaries carry no `items` attribute at all, so list views cannot read
line items that were never loaded. Call `hydrate()` with items fetched
from the repository to obtain a detail.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from ..enums import OrderStatus
from ..exceptions import ControlError
from .parties import Provider, Warehouse
from .product import Product


TERMINAL_STATUSES = frozenset({OrderStatus.FULFILLED, OrderStatus.CANCELLED})

# Unit prices are stored with two decimals
PRICE_QUANTUM = Decimal("0.01")


@dataclass(frozen=True)
class OrderItem:
    """Line item of an order. Unit price is an order-time snapshot."""
    quantity: int
    unit_price: Decimal
    product: Product

    def __post_init__(self):
        if not isinstance(self.unit_price, Decimal):
            object.__setattr__(self, "unit_price", Decimal(str(self.unit_price)))

        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")
        if self.unit_price < 0:
            raise ValueError(f"Unit price cannot be negative, got: {self.unit_price}")
        if self.unit_price != self.unit_price.quantize(PRICE_QUANTUM):
            raise ValueError(
                f"Unit price cannot have more than two decimals, got: {self.unit_price}"
            )

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class OrderRevision:
    """
    Audit record of a status change.

    A revision whose `id` is None has not been written to storage yet.
    """
    date: datetime
    note: str
    status: OrderStatus
    order_id: Optional[int] = None
    id: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.id is None


def calculate_total_price(items: Iterable[OrderItem]) -> Decimal:
    """Sum of quantity x unit price; never stored."""
    return sum((item.line_total for item in items), Decimal("0"))


@dataclass
class OrderHeader:
    """Fields shared by every loaded shape of an order."""
    date: datetime
    status: OrderStatus
    warehouse: Warehouse
    provider: Provider
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


@dataclass
class OrderSummary(OrderHeader):
    """Header-only order, as loaded by list queries."""

    def hydrate(self, items: List[OrderItem]) -> "OrderDetail":
        """Attach separately loaded items, producing a detail."""
        return OrderDetail(
            date=self.date,
            status=self.status,
            warehouse=self.warehouse,
            provider=self.provider,
            id=self.id,
            items=list(items),
        )


@dataclass
class OrderDetail(OrderHeader):
    """Order header together with its line items."""
    items: List[OrderItem] = field(default_factory=list)

    def calculate_total_price(self) -> Decimal:
        return calculate_total_price(self.items)

    def change_status(
        self,
        status: OrderStatus,
        note: str,
        at: Optional[datetime] = None,
    ) -> OrderRevision:
        """
        Business rule: move to a new status and describe the change.

        Returns the pending revision; persisting it is up to the caller.

        Raises:
            ControlError: If the order is already fulfilled or cancelled
        """
        if self.status in TERMINAL_STATUSES:
            raise ControlError(
                f"Order {self.id} is {self.status.name} and cannot change status"
            )

        at = at or datetime.now()
        self.status = status
        return OrderRevision(date=at, note=note, status=status, order_id=self.id)


@dataclass
class OrderDraft:
    """
    Order being assembled before submission.

    Items are merged per product: adding a product that is already on
    the draft increases its quantity and takes the newest unit price.
    """
    warehouse: Warehouse
    provider: Optional[Provider] = None
    items: List[OrderItem] = field(default_factory=list)

    def choose_provider(self, provider: Provider) -> None:
        self.provider = provider

    def add_product(self, product: Product, unit_price: Decimal, quantity: int) -> OrderItem:
        """
        Add `quantity` units of `product` at `unit_price`.

        Raises:
            ControlError: If quantity is not positive or price is negative
        """
        if quantity <= 0:
            raise ControlError(f"Quantity must be positive, got: {quantity}")

        index = self._index_of(product)
        try:
            if index is None:
                item = OrderItem(quantity=quantity, unit_price=unit_price, product=product)
                self.items.append(item)
            else:
                existing = self.items[index]
                item = replace(
                    existing,
                    quantity=existing.quantity + quantity,
                    unit_price=unit_price,
                )
                self.items[index] = item
        except ValueError as e:
            raise ControlError(str(e)) from e

        return item

    def remove_product(self, product: Product, quantity: Optional[int] = None) -> None:
        """
        Remove `quantity` units of `product`, or the whole line when omitted.

        Raises:
            ControlError: If the product is not on the draft or quantity is not positive
        """
        if quantity is not None and quantity <= 0:
            raise ControlError(f"Quantity must be positive, got: {quantity}")

        index = self._index_of(product)
        if index is None:
            raise ControlError(f"Product {product.name} is not part of the order")

        existing = self.items[index]
        if quantity is None or quantity >= existing.quantity:
            del self.items[index]
        else:
            self.items[index] = replace(existing, quantity=existing.quantity - quantity)

    def calculate_total_price(self) -> Decimal:
        return calculate_total_price(self.items)

    def finalize(self, at: Optional[datetime] = None) -> OrderDetail:
        """
        Turn the draft into an unsaved PENDING order.

        Raises:
            ControlError: If no provider was chosen or the draft is empty
        """
        if self.provider is None:
            raise ControlError("Please choose the provider")
        if not self.items:
            raise ControlError("Order has no items")

        return OrderDetail(
            date=at or datetime.now(),
            status=OrderStatus.PENDING,
            warehouse=self.warehouse,
            provider=self.provider,
            items=list(self.items),
        )

    def _index_of(self, product: Product) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.product.id == product.id:
                return index
        return None
