"""Integration tests for WarehouseOrderService."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ordering.application.dtos import (
    ChangeStatusRequest,
    CreateWarehouseOrderRequest,
    OrderItemRequest,
)
from ordering.application.services import (
    CatalogService,
    StockReportService,
    WarehouseOrderService,
)
from ordering.data import UnitOfWork
from ordering.domain.enums import OrderStatus
from ordering.domain.exceptions import ControlError


@pytest.fixture
def service(database) -> WarehouseOrderService:
    return WarehouseOrderService(database.session_factory)


def order_request(seed, **overrides) -> CreateWarehouseOrderRequest:
    pallet, wrap, _ = seed.products
    data = {
        "warehouse_id": seed.warehouse.id,
        "provider_id": seed.provider.id,
        "items": [
            OrderItemRequest(product_id=pallet.id, quantity=2),
            OrderItemRequest(product_id=wrap.id, quantity=3),
        ],
    }
    data.update(overrides)
    return CreateWarehouseOrderRequest(**data)


@pytest.mark.asyncio
async def test_place_order_stores_header_items_and_first_revision(service, seed):
    order = await service.place_order(order_request(seed))

    assert order.id is not None
    assert order.status == OrderStatus.PENDING
    assert order.warehouse.name == "Central Warehouse"
    assert order.provider.name == "Nordic Supplies"
    assert len(order.items) == 2
    assert order.total_price == Decimal("39.97")
    assert len(order.revisions) == 1
    assert order.revisions[0].note == "Order created"
    assert order.revisions[0].status == OrderStatus.PENDING


@pytest.mark.asyncio
async def test_place_order_uses_requested_unit_price(service, seed):
    pallet = seed.products[0]
    request = order_request(
        seed,
        items=[OrderItemRequest(product_id=pallet.id, quantity=4, unit_price=Decimal("10.00"))],
    )

    order = await service.place_order(request)

    assert order.items[0].unit_price == Decimal("10.00")
    assert order.total_price == Decimal("40.00")


def test_order_line_rejects_sub_cent_unit_price():
    with pytest.raises(ValidationError):
        OrderItemRequest(product_id=1, quantity=8, unit_price=Decimal("0.125"))


@pytest.mark.asyncio
async def test_place_order_keeps_two_decimal_unit_price_exactly(service, seed):
    wrap = seed.products[1]
    request = order_request(
        seed,
        items=[OrderItemRequest(product_id=wrap.id, quantity=8, unit_price=Decimal("0.13"))],
    )

    placed = await service.place_order(request)
    reloaded = await service.get_order(placed.id)

    assert reloaded.items[0].unit_price == Decimal("0.13")
    assert reloaded.total_price == Decimal("1.04")
    assert reloaded.total_price == placed.total_price


@pytest.mark.asyncio
async def test_place_order_merges_repeated_products(service, seed):
    pallet = seed.products[0]
    request = order_request(
        seed,
        items=[
            OrderItemRequest(product_id=pallet.id, quantity=1),
            OrderItemRequest(product_id=pallet.id, quantity=2),
        ],
    )

    order = await service.place_order(request)

    assert len(order.items) == 1
    assert order.items[0].quantity == 3


@pytest.mark.asyncio
async def test_place_order_without_items_is_rejected(service, database, seed):
    with pytest.raises(ControlError, match="no items"):
        await service.place_order(order_request(seed, items=[]))

    async with UnitOfWork(database.session_factory) as uow:
        assert await uow.orders.all() == []


@pytest.mark.asyncio
async def test_place_order_with_unknown_product_writes_nothing(service, database, seed):
    request = order_request(seed, items=[OrderItemRequest(product_id=999, quantity=1)])

    with pytest.raises(ControlError, match="Product 999"):
        await service.place_order(request)

    async with UnitOfWork(database.session_factory) as uow:
        assert await uow.orders.all() == []


@pytest.mark.asyncio
async def test_place_order_with_unknown_provider(service, seed):
    with pytest.raises(ControlError, match="Provider 999"):
        await service.place_order(order_request(seed, provider_id=999))


@pytest.mark.asyncio
async def test_draft_workflow(service, seed):
    pallet, _, labels = seed.products

    draft = await service.start_draft(seed.warehouse.id)
    draft.choose_provider(seed.other_provider)
    draft.add_product(pallet, pallet.price, 5)
    draft.add_product(labels, labels.price, 10)
    draft.remove_product(pallet, 2)

    order_id = await service.finish_draft(draft, note="Weekly restock")
    order = await service.get_order(order_id, include_revisions=True)

    assert order.provider.name == "Baltic Trading"
    assert order.total_price == Decimal("57.50")
    assert [revision.note for revision in order.revisions] == ["Weekly restock"]


@pytest.mark.asyncio
async def test_start_draft_for_unknown_warehouse(service, seed):
    with pytest.raises(ControlError):
        await service.start_draft(999)


@pytest.mark.asyncio
async def test_get_order_without_revisions(service, seed):
    placed = await service.place_order(order_request(seed))

    order = await service.get_order(placed.id)

    assert order.revisions is None
    assert order.total_price == Decimal("39.97")
    assert await service.get_order(999) is None


@pytest.mark.asyncio
async def test_change_status_records_revision(service, seed):
    placed = await service.place_order(order_request(seed))

    updated = await service.change_status(
        placed.id, ChangeStatusRequest(status=OrderStatus.APPROVED, note="Approved")
    )

    assert updated.status == OrderStatus.APPROVED
    assert [revision.status for revision in updated.revisions] == [
        OrderStatus.PENDING,
        OrderStatus.APPROVED,
    ]
    assert all(revision.id is not None for revision in updated.revisions)

    history = await service.get_order_revisions(placed.id)
    assert [revision.note for revision in history] == ["Order created", "Approved"]
    reloaded = await service.get_order(placed.id)
    assert reloaded.status == OrderStatus.APPROVED
    assert reloaded.date == placed.date


@pytest.mark.asyncio
async def test_change_status_after_cancel_is_rejected(service, seed):
    placed = await service.place_order(order_request(seed))
    await service.change_status(placed.id, ChangeStatusRequest(status=OrderStatus.CANCELLED))

    with pytest.raises(ControlError):
        await service.change_status(placed.id, ChangeStatusRequest(status=OrderStatus.APPROVED))

    history = await service.get_order_revisions(placed.id)
    assert len(history) == 2


@pytest.mark.asyncio
async def test_change_status_of_unknown_order(service, seed):
    assert await service.change_status(999, ChangeStatusRequest(status=OrderStatus.APPROVED)) is None


@pytest.mark.asyncio
async def test_list_orders_by_party(service, seed):
    first = await service.place_order(order_request(seed))
    second = await service.place_order(
        order_request(seed, warehouse_id=seed.other_warehouse.id, provider_id=seed.other_provider.id)
    )

    assert [order.id for order in await service.list_orders()] == [first.id, second.id]
    assert [order.id for order in await service.list_orders_for_warehouse(seed.warehouse.id)] == [
        first.id
    ]
    assert [
        order.id for order in await service.list_orders_for_provider(seed.other_provider.id)
    ] == [second.id]
    assert await service.list_orders_for_warehouse(999) is None
    assert await service.list_orders_for_provider(999) is None


@pytest.mark.asyncio
async def test_delete_order(service, seed):
    placed = await service.place_order(order_request(seed))

    assert await service.delete_order(placed.id) is True
    assert await service.get_order(placed.id) is None
    assert await service.get_order_items(placed.id) is None
    assert await service.delete_order(placed.id) is False


@pytest.mark.asyncio
async def test_catalog_and_stock_report_services(database, seed):
    products = await CatalogService(database.session_factory).list_products()
    reports = await StockReportService(database.session_factory).reports_for_store(seed.store.id)

    assert [product.name for product in products] == ["Pallet", "Shrink wrap", "Label roll"]
    assert reports == []
    assert await StockReportService(database.session_factory).reports_for_store(999) is None
