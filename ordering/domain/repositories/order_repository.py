"""Repository interface for the warehouse order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import (
    OrderDetail,
    OrderHeader,
    OrderItem,
    OrderRevision,
    OrderSummary,
)
from ..entities.parties import Provider, Warehouse


class WarehouseOrderRepository(ABC):
    """
    Abstract repository for warehouse order persistence.

    List operations return header-only summaries; only `select_by_id`
    loads line items. Revisions are always fetched separately.
    """

    @abstractmethod
    async def create(self, order: OrderHeader) -> int:
        """Insert the order header only and return its generated id.

        Items and revisions are written by `insert_order_items` and
        `insert_order_revision`.
        """
        pass

    @abstractmethod
    async def select_by_id(self, order_id: int) -> Optional[OrderDetail]:
        """Load header and items; None when no order has this id."""
        pass

    @abstractmethod
    async def all(self) -> List[OrderSummary]:
        """Load every order header."""
        pass

    @abstractmethod
    async def update(self, order: OrderHeader) -> int:
        """Update date and status; returns rows affected."""
        pass

    @abstractmethod
    async def delete(self, order: OrderHeader) -> int:
        """Delete the order; returns header rows affected."""
        pass

    @abstractmethod
    async def get_orders_by_warehouse(self, warehouse: Warehouse) -> List[OrderSummary]:
        pass

    @abstractmethod
    async def get_orders_by_provider(self, provider: Provider) -> List[OrderSummary]:
        pass

    @abstractmethod
    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        pass

    @abstractmethod
    async def insert_order_items(self, items: List[OrderItem], order_id: int) -> int:
        """Insert line items for an existing header; returns rows inserted."""
        pass

    @abstractmethod
    async def get_order_revisions(self, order: OrderHeader) -> List[OrderRevision]:
        pass

    @abstractmethod
    async def insert_order_revision(
        self,
        revisions: List[OrderRevision],
        order_id: int,
    ) -> Optional[int]:
        """Insert the first pending revision in `revisions`.

        Only one revision is written per call. The written entry is
        replaced in `revisions` by a copy carrying its new id.

        Returns:
            Generated id, or None if no revision was pending
        """
        pass
