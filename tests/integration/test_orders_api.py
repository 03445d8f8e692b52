"""Integration tests for the order HTTP API."""
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from apps.api.main import create_app


@pytest_asyncio.fixture
async def client(database, seed) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app sharing the test database."""
    app = create_app(database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


def order_payload(seed, **overrides) -> dict:
    pallet, wrap, _ = seed.products
    payload = {
        "warehouse_id": seed.warehouse.id,
        "provider_id": seed.provider.id,
        "items": [
            {"product_id": pallet.id, "quantity": 2},
            {"product_id": wrap.id, "quantity": 3},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_create_and_fetch_order(client, seed):
    response = await client.post("/api/v1/orders", json=order_payload(seed))

    assert response.status_code == 201
    created = response.json()
    assert created["status"] == "PENDING"
    assert Decimal(created["total_price"]) == Decimal("39.97")
    assert len(created["revisions"]) == 1

    response = await client.get(f"/api/v1/orders/{created['id']}")

    assert response.status_code == 200
    order = response.json()
    assert order["warehouse"]["name"] == "Central Warehouse"
    assert len(order["items"]) == 2
    assert order["revisions"] is None

    response = await client.get(f"/api/v1/orders/{created['id']}?include_revisions=true")
    assert response.json()["revisions"][0]["note"] == "Order created"


@pytest.mark.asyncio
async def test_list_orders_returns_headers_only(client, seed):
    await client.post("/api/v1/orders", json=order_payload(seed))

    response = await client.get("/api/v1/orders")

    assert response.status_code == 200
    orders = response.json()
    assert len(orders) == 1
    assert "items" not in orders[0]
    assert orders[0]["provider"]["name"] == "Nordic Supplies"


@pytest.mark.asyncio
async def test_get_unknown_order(client):
    response = await client.get("/api/v1/orders/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_order_without_items(client, seed):
    response = await client.post("/api/v1/orders", json=order_payload(seed, items=[]))

    assert response.status_code == 400
    assert response.json()["detail"] == "Order has no items"


@pytest.mark.asyncio
async def test_create_order_with_invalid_quantity(client, seed):
    payload = order_payload(seed, items=[{"product_id": seed.products[0].id, "quantity": 0}])

    response = await client.post("/api/v1/orders", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_order_with_sub_cent_unit_price(client, seed):
    payload = order_payload(
        seed,
        items=[{"product_id": seed.products[1].id, "quantity": 8, "unit_price": "0.125"}],
    )

    response = await client.post("/api/v1/orders", json=payload)

    assert response.status_code == 422
    assert (await client.get("/api/v1/orders")).json() == []


@pytest.mark.asyncio
async def test_change_status_flow(client, seed):
    created = (await client.post("/api/v1/orders", json=order_payload(seed))).json()

    response = await client.post(
        f"/api/v1/orders/{created['id']}/status",
        json={"status": "FULFILLED", "note": "Delivered"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "FULFILLED"

    response = await client.post(
        f"/api/v1/orders/{created['id']}/status", json={"status": "PENDING"}
    )
    assert response.status_code == 400

    response = await client.get(f"/api/v1/orders/{created['id']}/revisions")
    assert [revision["status"] for revision in response.json()] == ["PENDING", "FULFILLED"]


@pytest.mark.asyncio
async def test_order_items_endpoint(client, seed):
    created = (await client.post("/api/v1/orders", json=order_payload(seed))).json()

    response = await client.get(f"/api/v1/orders/{created['id']}/items")

    assert response.status_code == 200
    totals = sorted(Decimal(item["line_total"]) for item in response.json())
    assert totals == [Decimal("14.97"), Decimal("25.00")]


@pytest.mark.asyncio
async def test_order_items_of_unknown_order(client):
    response = await client.get("/api/v1/orders/999/items")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_order(client, seed):
    created = (await client.post("/api/v1/orders", json=order_payload(seed))).json()

    response = await client.delete(f"/api/v1/orders/{created['id']}")
    assert response.status_code == 204

    response = await client.delete(f"/api/v1/orders/{created['id']}")
    assert response.status_code == 404
    response = await client.get(f"/api/v1/orders/{created['id']}/revisions")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_orders_by_warehouse_and_provider(client, seed):
    await client.post("/api/v1/orders", json=order_payload(seed))

    response = await client.get(f"/api/v1/warehouses/{seed.warehouse.id}/orders")
    assert len(response.json()) == 1

    response = await client.get(f"/api/v1/warehouses/{seed.other_warehouse.id}/orders")
    assert response.json() == []

    response = await client.get(f"/api/v1/providers/{seed.other_provider.id}/orders")
    assert response.json() == []

    response = await client.get("/api/v1/providers/999/orders")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_products_and_stock_reports(client, seed):
    response = await client.get("/api/v1/products")
    assert [product["name"] for product in response.json()] == [
        "Pallet",
        "Shrink wrap",
        "Label roll",
    ]

    response = await client.get(f"/api/v1/stores/{seed.store.id}/stock-reports")
    assert response.status_code == 200
    assert response.json() == []

    response = await client.get("/api/v1/stores/999/stock-reports")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_storage_failure_maps_to_503(client, database):
    await database.drop_all()

    response = await client.get("/api/v1/orders")

    assert response.status_code == 503
    assert "failed" in response.json()["detail"]
