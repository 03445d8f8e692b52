"""Pytest configuration and fixtures shared by the test suite."""

from dataclasses import dataclass
from decimal import Decimal
from typing import AsyncGenerator, List

import pytest_asyncio

from ordering.data import Database, UnitOfWork
from ordering.data.models import (
    AddressModel,
    ProductModel,
    ProviderModel,
    StoreModel,
    WarehouseModel,
)
from ordering.domain.entities import Product, Provider, Store, Warehouse
from ordering.settings import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@dataclass
class SeedData:
    """Reference rows every order test needs."""
    warehouse: Warehouse
    other_warehouse: Warehouse
    provider: Provider
    other_provider: Provider
    store: Store
    products: List[Product]


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create test database with all tables."""
    database = Database(DatabaseSettings(database_url=TEST_DATABASE_URL))
    await database.init()

    yield database

    await database.close()


@pytest_asyncio.fixture
async def seed(database: Database) -> SeedData:
    """Insert warehouses, providers, a store and products."""
    async with database.session_factory() as session:
        address = AddressModel(
            street="Sofiendalsvej 60", city="Aalborg", zip_code="9200", country="Denmark"
        )
        session.add(address)
        await session.flush()

        warehouse = WarehouseModel(
            name="Central Warehouse",
            email="central@warehouse.example",
            password="secret",
            address_id=address.id,
        )
        other_warehouse = WarehouseModel(
            name="North Warehouse", email="north@warehouse.example", password="secret"
        )
        provider = ProviderModel(
            name="Nordic Supplies", email="sales@nordic.example", address_id=address.id
        )
        other_provider = ProviderModel(name="Baltic Trading", email="orders@baltic.example")
        store = StoreModel(name="City Store", email="city@store.example", password="secret")
        products = [
            ProductModel(name="Pallet", weight=Decimal("25.000"), price=Decimal("12.50")),
            ProductModel(name="Shrink wrap", weight=Decimal("1.200"), price=Decimal("4.99")),
            ProductModel(name="Label roll", weight=Decimal("0.300"), price=Decimal("2.00")),
        ]
        session.add_all(
            [warehouse, other_warehouse, provider, other_provider, store, *products]
        )
        await session.commit()

        ids = {
            "warehouse": warehouse.id,
            "other_warehouse": other_warehouse.id,
            "provider": provider.id,
            "other_provider": other_provider.id,
            "store": store.id,
            "products": [product.id for product in products],
        }

    async with UnitOfWork(database.session_factory) as uow:
        return SeedData(
            warehouse=await uow.warehouses.get_by_id(ids["warehouse"]),
            other_warehouse=await uow.warehouses.get_by_id(ids["other_warehouse"]),
            provider=await uow.providers.get_by_id(ids["provider"]),
            other_provider=await uow.providers.get_by_id(ids["other_provider"]),
            store=await uow.stores.get_by_id(ids["store"]),
            products=[await uow.products.get_by_id(pid) for pid in ids["products"]],
        )


@pytest_asyncio.fixture
async def uow(database: Database) -> AsyncGenerator[UnitOfWork, None]:
    """Open a Unit of Work over the test database."""
    async with UnitOfWork(database.session_factory) as unit_of_work:
        yield unit_of_work
