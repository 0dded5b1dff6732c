from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from src.orders.infrastructure.persistence.repositories.order_repository import OrderRepository


async def _place_order(session, buyer_id, status=None):
    categories = CategoryRepository(session)
    category = await categories.get_by_slug("books") or await categories.create("Books", "books")
    product = await ProductRepository(session).create(
        {
            "name": "Clean Code",
            "slug": f"clean-code-{uuid4().hex[:6]}",
            "description": "A handbook",
            "price": 30.0,
            "category_id": category.id,
            "quantity": 5,
        }
    )
    order = await OrderRepository(session).create(UUID(buyer_id), [product.id], status=status)
    return str(order.id)


def test_buyer_sees_only_own_orders(client: TestClient, signup, run_db):
    ann, ann_headers = signup("ann@example.test")
    bob, bob_headers = signup("bob@example.test")
    own = run_db(_place_order, ann["id"])
    run_db(_place_order, bob["id"])

    r = client.get("/api/v1/auth/orders", headers=ann_headers)

    assert r.status_code == 200
    orders = r.json()
    assert [o["id"] for o in orders] == [own]
    assert orders[0]["buyer"] == {"id": ann["id"], "name": "ann"}
    assert orders[0]["status"] == "Not Processed"
    assert orders[0]["products"][0]["name"] == "Clean Code"

    assert client.get("/api/v1/auth/orders").status_code == 401


def test_admin_lists_and_updates_orders(client: TestClient, signup, admin, run_db):
    ann, ann_headers = signup("ann@example.test")
    _, admin_headers = admin
    first = run_db(_place_order, ann["id"])
    second = run_db(_place_order, ann["id"], "Processing")

    assert client.get("/api/v1/auth/all-orders", headers=ann_headers).status_code == 401

    listing = client.get("/api/v1/auth/all-orders", headers=admin_headers).json()
    assert [o["id"] for o in listing] == [second, first]

    r = client.put(
        f"/api/v1/auth/order-status/{first}",
        json={"status": "Shipped"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["id"] == first
    assert r.json()["status"] == "Shipped"

    mine = client.get("/api/v1/auth/orders", headers=ann_headers).json()
    assert {o["id"]: o["status"] for o in mine} == {first: "Shipped", second: "Processing"}


def test_status_update_of_unknown_order(client: TestClient, admin):
    _, headers = admin

    r = client.put(f"/api/v1/auth/order-status/{uuid4()}", json={"status": "cancel"}, headers=headers)

    assert r.status_code == 200
    assert r.json() is None


def test_status_update_without_body_keeps_order(client: TestClient, signup, admin, run_db):
    ann, _ = signup("ann@example.test")
    _, headers = admin
    order_id = run_db(_place_order, ann["id"], "Processing")

    r = client.put(f"/api/v1/auth/order-status/{order_id}", headers=headers)

    assert r.status_code == 200
    assert r.json()["id"] == order_id
    assert r.json()["status"] == "Processing"
