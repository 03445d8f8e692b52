"""Application service for warehouse order operations."""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from ordering.application.dtos import (
    ChangeStatusRequest,
    CreateWarehouseOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderRevisionDTO,
    OrderSummaryDTO,
)
from ordering.data.uow import UnitOfWork, create_uow
from ordering.domain.entities import OrderDraft, OrderRevision
from ordering.domain.exceptions import ControlError

from .converters import item_to_dto, order_to_dto, revision_to_dto, summary_to_dto


logger = logging.getLogger(__name__)


class WarehouseOrderService:
    """
    Application service for orchestrating warehouse order operations.

    Each public method is one user action: it opens a Unit of Work,
    drives the repositories and commits once.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def start_draft(self, warehouse_id: int) -> OrderDraft:
        """Begin assembling an order for a warehouse.

        Raises:
            ControlError: If the warehouse does not exist
        """
        async with create_uow(self._session_factory) as uow:
            warehouse = await uow.warehouses.get_by_id(warehouse_id)

        if warehouse is None:
            raise ControlError(f"Warehouse {warehouse_id} not found")
        return OrderDraft(warehouse=warehouse)

    async def place_order(self, request: CreateWarehouseOrderRequest) -> OrderDTO:
        """Create an order from a request in one transaction.

        Args:
            request: CreateWarehouseOrderRequest DTO

        Returns:
            OrderDTO of the stored order

        Raises:
            ControlError: If a referenced entity is unknown or the order is empty
        """
        async with create_uow(self._session_factory) as uow:
            warehouse = await uow.warehouses.get_by_id(request.warehouse_id)
            if warehouse is None:
                raise ControlError(f"Warehouse {request.warehouse_id} not found")

            provider = await uow.providers.get_by_id(request.provider_id)
            if provider is None:
                raise ControlError(f"Provider {request.provider_id} not found")

            draft = OrderDraft(warehouse=warehouse, provider=provider)
            for line in request.items:
                product = await uow.products.get_by_id(line.product_id)
                if product is None:
                    raise ControlError(f"Product {line.product_id} not found")
                unit_price = line.unit_price if line.unit_price is not None else product.price
                draft.add_product(product, unit_price, line.quantity)

            order_id = await self._store_draft(uow, draft, request.note)
            await uow.commit()

            order = await uow.orders.select_by_id(order_id)
            revisions = await uow.orders.get_order_revisions(order)
            return order_to_dto(order, revisions)

    async def finish_draft(self, draft: OrderDraft, note: str = "Order created") -> int:
        """Store an assembled draft and return the new order id.

        Raises:
            ControlError: If the draft has no provider or no items
        """
        async with create_uow(self._session_factory) as uow:
            order_id = await self._store_draft(uow, draft, note)
            await uow.commit()
            return order_id

    async def get_order(self, order_id: int, include_revisions: bool = False) -> Optional[OrderDTO]:
        """Get order by ID.

        Args:
            order_id: Order ID
            include_revisions: Also load the revision history

        Returns:
            OrderDTO if found, None otherwise
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.select_by_id(order_id)
            if order is None:
                return None

            revisions = None
            if include_revisions:
                revisions = await uow.orders.get_order_revisions(order)

            return order_to_dto(order, revisions)

    async def list_orders(self) -> List[OrderSummaryDTO]:
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.all()
            return [summary_to_dto(order) for order in orders]

    async def list_orders_for_warehouse(self, warehouse_id: int) -> Optional[List[OrderSummaryDTO]]:
        """List order summaries of a warehouse; None if the warehouse is unknown."""
        async with create_uow(self._session_factory) as uow:
            warehouse = await uow.warehouses.get_by_id(warehouse_id)
            if warehouse is None:
                return None
            orders = await uow.orders.get_orders_by_warehouse(warehouse)
            return [summary_to_dto(order) for order in orders]

    async def list_orders_for_provider(self, provider_id: int) -> Optional[List[OrderSummaryDTO]]:
        """List order summaries of a provider; None if the provider is unknown."""
        async with create_uow(self._session_factory) as uow:
            provider = await uow.providers.get_by_id(provider_id)
            if provider is None:
                return None
            orders = await uow.orders.get_orders_by_provider(provider)
            return [summary_to_dto(order) for order in orders]

    async def change_status(self, order_id: int, request: ChangeStatusRequest) -> Optional[OrderDTO]:
        """Move an order to a new status and record a revision.

        Returns:
            Updated OrderDTO with its history, None if the order is unknown

        Raises:
            ControlError: If the order is already fulfilled or cancelled
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.select_by_id(order_id)
            if order is None:
                return None

            revisions = await uow.orders.get_order_revisions(order)
            revisions.append(order.change_status(request.status, request.note))

            await uow.orders.update(order)
            await uow.orders.insert_order_revision(revisions, order.id)
            await uow.commit()

            logger.info(f"Order {order_id} moved to {order.status.name}")
            return order_to_dto(order, revisions)

    async def delete_order(self, order_id: int) -> bool:
        """Delete an order with its items and history.

        Returns:
            True if the order existed
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.select_by_id(order_id)
            if order is None:
                return False

            deleted = await uow.orders.delete(order)
            await uow.commit()
            return deleted > 0

    async def get_order_items(self, order_id: int) -> Optional[List[OrderItemDTO]]:
        """Line items of an order; None if the order is unknown."""
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.select_by_id(order_id)
            if order is None:
                return None
            return [item_to_dto(item) for item in order.items]

    async def get_order_revisions(self, order_id: int) -> Optional[List[OrderRevisionDTO]]:
        """Revision history of an order; None if the order is unknown."""
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.select_by_id(order_id)
            if order is None:
                return None
            revisions = await uow.orders.get_order_revisions(order)
            return [revision_to_dto(revision) for revision in revisions]

    async def _store_draft(self, uow: UnitOfWork, draft: OrderDraft, note: str) -> int:
        """Write header, items and the initial revision in the given unit of work."""
        order = draft.finalize()

        order.id = await uow.orders.create(order)
        await uow.orders.insert_order_items(order.items, order.id)

        revisions = [
            OrderRevision(date=order.date, note=note, status=order.status, order_id=order.id)
        ]
        await uow.orders.insert_order_revision(revisions, order.id)

        logger.info(
            f"✅ Order {order.id} placed with {len(order.items)} items "
            f"(total: {order.calculate_total_price()})"
        )
        return order.id
