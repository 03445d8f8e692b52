"""
SQLAlchemy Warehouse Order Repository Implementation.

Translates between the relational layout (one header row, N item rows,
N revision rows linked by orderID) and the order aggregate.

Loading contract:
- select_by_id: header + items (revisions via get_order_revisions)
- all / get_orders_by_*: header only (OrderSummary)
"""
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities import (
    OrderDetail,
    OrderHeader,
    OrderItem,
    OrderRevision,
    OrderSummary,
    Product,
    Provider,
    Warehouse,
)
from ordering.domain.exceptions import DataAccessError
from ordering.domain.repositories import (
    ProviderRepository,
    WarehouseOrderRepository,
    WarehouseRepository,
)

from ..errors import translate_errors
from ..mappers import OrderItemMapper, OrderMapper, OrderRevisionMapper, ProductMapper
from ..models import (
    ProductModel,
    WarehouseOrderItemModel,
    WarehouseOrderModel,
    WarehouseOrderRevisionModel,
)


logger = logging.getLogger(__name__)


class SqlAlchemyWarehouseOrderRepository(WarehouseOrderRepository):
    """
    SQLAlchemy implementation of WarehouseOrderRepository.

    Repositories only flush; commit is handled by the Unit of Work.
    """

    def __init__(
        self,
        session: AsyncSession,
        warehouses: WarehouseRepository,
        providers: ProviderRepository,
    ) -> None:
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
            warehouses: Repository used to resolve an order's warehouse
            providers: Repository used to resolve an order's provider
        """
        self._session = session
        self._warehouses = warehouses
        self._providers = providers

    async def create(self, order: OrderHeader) -> int:
        """
        Insert the order header.

        Items and revisions are NOT written here; call insert_order_items
        and insert_order_revision with the returned id.

        Args:
            order: Order with an already persisted warehouse and provider

        Returns:
            Generated order id
        """
        if order.provider is None or order.provider.id is None:
            raise DataAccessError("Order provider must be persisted before the order")
        if order.warehouse is None or order.warehouse.id is None:
            raise DataAccessError("Order warehouse must be persisted before the order")

        logger.info(
            f"Creating order: warehouse={order.warehouse.id}, provider={order.provider.id}"
        )

        with translate_errors("Create order"):
            order_model = OrderMapper.to_persistence(order)
            self._session.add(order_model)
            await self._session.flush()

        logger.info(f"✅ Created order: {order_model.id}")
        return order_model.id

    async def select_by_id(self, order_id: int) -> Optional[OrderDetail]:
        """
        Get order header and items by id.

        Args:
            order_id: Order id to lookup

        Returns:
            OrderDetail if found, None otherwise
        """
        logger.info(f"Getting order: {order_id}")

        with translate_errors(f"Select order {order_id}"):
            result = await self._session.execute(
                select(WarehouseOrderModel).where(WarehouseOrderModel.id == order_id)
            )
            order_model = result.scalar_one_or_none()

        if not order_model:
            logger.info(f"Order not found: {order_id}")
            return None

        warehouse = await self._resolve_warehouse(order_model.warehouse_id, {})
        provider = await self._resolve_provider(order_model.provider_id, {})
        summary = OrderMapper.to_summary(order_model, warehouse, provider)

        items = await self.get_order_items(order_model.id)

        logger.info(f"✅ Found order: {order_id} ({len(items)} items)")
        return summary.hydrate(items)

    async def all(self) -> List[OrderSummary]:
        """
        List every order header.

        Items and revisions are deliberately not loaded.
        """
        logger.info("Finding all orders")

        orders = await self._select_summaries(
            select(WarehouseOrderModel).order_by(WarehouseOrderModel.id)
        )

        logger.info(f"✅ Found {len(orders)} orders")
        return orders

    async def update(self, order: OrderHeader) -> int:
        """
        Update the mutable header fields (date, status).

        Items and revisions are untouched.

        Returns:
            Number of rows affected
        """
        logger.info(f"Updating order: {order.id} (status: {order.status.name})")

        with translate_errors(f"Update order {order.id}"):
            result = await self._session.execute(
                update(WarehouseOrderModel)
                .where(WarehouseOrderModel.id == order.id)
                .values(date=order.date, status=order.status.name)
            )

        return result.rowcount

    async def delete(self, order: OrderHeader) -> int:
        """
        Delete an order together with its items and revisions.

        Child rows are removed explicitly before the header so the
        outcome does not depend on the database enforcing cascades.

        Returns:
            Number of header rows deleted
        """
        logger.info(f"Deleting order: {order.id}")

        with translate_errors(f"Delete order {order.id}"):
            await self._session.execute(
                delete(WarehouseOrderItemModel)
                .where(WarehouseOrderItemModel.order_id == order.id)
            )
            await self._session.execute(
                delete(WarehouseOrderRevisionModel)
                .where(WarehouseOrderRevisionModel.order_id == order.id)
            )
            result = await self._session.execute(
                delete(WarehouseOrderModel)
                .where(WarehouseOrderModel.id == order.id)
            )

        if result.rowcount:
            logger.info(f"✅ Deleted order: {order.id}")
        else:
            logger.warning(f"Order not found for deletion: {order.id}")
        return result.rowcount

    async def get_orders_by_warehouse(self, warehouse: Warehouse) -> List[OrderSummary]:
        """
        Find order headers placed by a warehouse.

        The given warehouse instance is reused for every summary.
        """
        logger.info(f"Finding orders for warehouse: {warehouse.id}")

        orders = await self._select_summaries(
            select(WarehouseOrderModel)
            .where(WarehouseOrderModel.warehouse_id == warehouse.id)
            .order_by(WarehouseOrderModel.id),
            warehouses={warehouse.id: warehouse},
        )

        logger.info(f"✅ Found {len(orders)} orders for warehouse {warehouse.id}")
        return orders

    async def get_orders_by_provider(self, provider: Provider) -> List[OrderSummary]:
        """
        Find order headers placed with a provider.

        The given provider instance is reused for every summary.
        """
        logger.info(f"Finding orders for provider: {provider.id}")

        orders = await self._select_summaries(
            select(WarehouseOrderModel)
            .where(WarehouseOrderModel.provider_id == provider.id)
            .order_by(WarehouseOrderModel.id),
            providers={provider.id: provider},
        )

        logger.info(f"✅ Found {len(orders)} orders for provider {provider.id}")
        return orders

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        """
        Load the line items of an order with their products.

        Items referencing the same product share one Product instance.
        """
        with translate_errors(f"Select items of order {order_id}"):
            result = await self._session.execute(
                select(WarehouseOrderItemModel, ProductModel)
                .join(ProductModel, WarehouseOrderItemModel.product_id == ProductModel.id)
                .where(WarehouseOrderItemModel.order_id == order_id)
            )
            rows = result.all()

        products: Dict[int, Product] = {}
        items = []
        for item_model, product_model in rows:
            product = products.get(product_model.id)
            if product is None:
                product = products[product_model.id] = ProductMapper.to_domain(product_model)
            items.append(OrderItemMapper.to_domain(item_model, product))

        return items

    async def insert_order_items(self, items: List[OrderItem], order_id: int) -> int:
        """
        Insert line items for an already created order header.

        Returns:
            Number of item rows inserted
        """
        for item in items:
            if item.product.id is None:
                raise DataAccessError(
                    f"Product {item.product.name} must be persisted before ordering it"
                )

        logger.info(f"Inserting {len(items)} items for order: {order_id}")

        with translate_errors(f"Insert items of order {order_id}"):
            self._session.add_all(
                [OrderItemMapper.to_persistence(item, order_id) for item in items]
            )
            await self._session.flush()

        return len(items)

    async def get_order_revisions(self, order: OrderHeader) -> List[OrderRevision]:
        """Load the revision history of an order, oldest first."""
        with translate_errors(f"Select revisions of order {order.id}"):
            result = await self._session.execute(
                select(WarehouseOrderRevisionModel)
                .where(WarehouseOrderRevisionModel.order_id == order.id)
                .order_by(WarehouseOrderRevisionModel.id)
            )
            models = result.scalars().all()

        return [OrderRevisionMapper.to_domain(model) for model in models]

    async def insert_order_revision(
        self,
        revisions: List[OrderRevision],
        order_id: int,
    ) -> Optional[int]:
        """
        Insert the first pending revision found in `revisions`.

        Only ONE revision is written per call, even when several are
        pending. The written entry is replaced in the list by a copy that
        carries the generated id, so repeated calls work through the list.

        Args:
            revisions: Mix of persisted and pending revisions
            order_id: Order the revision belongs to

        Returns:
            Generated revision id, or None if nothing was pending
        """
        for index, revision in enumerate(revisions):
            if not revision.is_pending:
                continue

            with translate_errors(f"Insert revision of order {order_id}"):
                revision_model = OrderRevisionMapper.to_persistence(revision, order_id)
                self._session.add(revision_model)
                await self._session.flush()

            revisions[index] = replace(revision, id=revision_model.id, order_id=order_id)
            logger.info(
                f"✅ Inserted revision {revision_model.id} for order {order_id} "
                f"({revision.status.name})"
            )
            return revision_model.id

        return None

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _select_summaries(
        self,
        statement,
        warehouses: Optional[Dict[int, Warehouse]] = None,
        providers: Optional[Dict[int, Provider]] = None,
    ) -> List[OrderSummary]:
        """Run a header query and resolve references once per distinct id."""
        warehouses = dict(warehouses or {})
        providers = dict(providers or {})

        with translate_errors("Select orders"):
            result = await self._session.execute(statement)
            order_models = result.scalars().all()

        orders = []
        for order_model in order_models:
            warehouse = await self._resolve_warehouse(order_model.warehouse_id, warehouses)
            provider = await self._resolve_provider(order_model.provider_id, providers)
            orders.append(OrderMapper.to_summary(order_model, warehouse, provider))

        return orders

    async def _resolve_warehouse(self, warehouse_id: int, known: Dict[int, Warehouse]) -> Warehouse:
        if warehouse_id not in known:
            warehouse = await self._warehouses.get_by_id(warehouse_id)
            if warehouse is None:
                raise DataAccessError(f"Warehouse {warehouse_id} referenced by an order is missing")
            known[warehouse_id] = warehouse
        return known[warehouse_id]

    async def _resolve_provider(self, provider_id: int, known: Dict[int, Provider]) -> Provider:
        if provider_id not in known:
            provider = await self._providers.get_by_id(provider_id)
            if provider is None:
                raise DataAccessError(f"Provider {provider_id} referenced by an order is missing")
            known[provider_id] = provider
        return known[provider_id]
