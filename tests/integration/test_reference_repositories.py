"""Integration tests for user, product and stock report repositories."""
from datetime import datetime

import pytest

from ordering.data import UnitOfWork
from ordering.domain.entities import (
    Address,
    Store,
    StoreStockReport,
    StoreStockReportItem,
    User,
    Warehouse,
)
from ordering.domain.exceptions import DataAccessError


@pytest.mark.asyncio
async def test_create_warehouse_with_address(database, seed):
    warehouse = Warehouse(
        name="South Warehouse",
        email="south@warehouse.example",
        password="secret",
        address=Address(street="Havnegade 1", city="Esbjerg", zip_code="6700", country="Denmark"),
    )

    async with UnitOfWork(database.session_factory) as uow:
        warehouse_id = await uow.users.create(warehouse)
        await uow.commit()

    assert warehouse.address.id is not None

    async with UnitOfWork(database.session_factory) as uow:
        loaded = await uow.warehouses.get_by_id(warehouse_id)

    assert isinstance(loaded, Warehouse)
    assert loaded.email == "south@warehouse.example"
    assert loaded.address.city == "Esbjerg"
    assert loaded.address.zip_code == "6700"


@pytest.mark.asyncio
async def test_create_store_without_address(database, seed):
    store = Store(name="Harbour Store", email="harbour@store.example", password="secret")

    async with UnitOfWork(database.session_factory) as uow:
        store_id = await uow.users.create(store)
        await uow.commit()

    async with UnitOfWork(database.session_factory) as uow:
        loaded = await uow.stores.get_by_id(store_id)

    assert isinstance(loaded, Store)
    assert loaded.name == "Harbour Store"
    assert loaded.address is None


@pytest.mark.asyncio
async def test_create_plain_user_is_rejected(uow, seed):
    user = User(name="Someone", email="someone@example.com", password="secret")

    with pytest.raises(DataAccessError):
        await uow.users.create(user)


@pytest.mark.asyncio
async def test_duplicate_email_raises_data_access_error(database, seed):
    duplicate = Warehouse(name="Copy", email="central@warehouse.example", password="secret")

    async with UnitOfWork(database.session_factory) as uow:
        with pytest.raises(DataAccessError):
            await uow.users.create(duplicate)


@pytest.mark.asyncio
async def test_seeded_warehouse_loads_its_address(seed):
    assert seed.warehouse.address is not None
    assert seed.warehouse.address.city == "Aalborg"
    assert seed.other_warehouse.address is None


@pytest.mark.asyncio
async def test_products_listed_in_id_order(uow, seed):
    products = await uow.products.all()

    assert [product.name for product in products] == ["Pallet", "Shrink wrap", "Label roll"]


@pytest.mark.asyncio
async def test_unknown_references_return_none(uow, seed):
    assert await uow.providers.get_by_id(999) is None
    assert await uow.warehouses.get_by_id(999) is None
    assert await uow.products.get_by_id(999) is None


@pytest.mark.asyncio
async def test_stock_reports_newest_first(database, seed):
    pallet, wrap, _ = seed.products
    older = StoreStockReport(
        store=seed.store,
        date=datetime(2024, 3, 1, 8, 0),
        items=[StoreStockReportItem(product=pallet, quantity=10)],
    )
    newer = StoreStockReport(
        store=seed.store,
        date=datetime(2024, 3, 8, 8, 0),
        items=[
            StoreStockReportItem(product=pallet, quantity=6),
            StoreStockReportItem(product=wrap, quantity=40),
        ],
    )

    async with UnitOfWork(database.session_factory) as uow:
        await uow.stock_reports.create(older)
        await uow.stock_reports.create(newer)
        await uow.commit()

    assert older.id is not None and newer.id is not None

    async with UnitOfWork(database.session_factory) as uow:
        reports = await uow.stock_reports.get_reports_by_store(seed.store)

    assert [report.id for report in reports] == [newer.id, older.id]
    assert reports[0].store is seed.store
    assert reports[0].total_quantity() == 46
    assert {item.product.name for item in reports[0].items} == {"Pallet", "Shrink wrap"}


@pytest.mark.asyncio
async def test_stock_report_for_unsaved_store_fails(uow, seed):
    report = StoreStockReport(
        store=Store(name="Ghost", email="ghost@store.example", password="x"),
        date=datetime(2024, 3, 1),
    )

    with pytest.raises(DataAccessError):
        await uow.stock_reports.create(report)
