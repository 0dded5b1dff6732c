from uuid import uuid4

from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from src.identity.infrastructure.persistence.repositories.user_repository import UserRepository
from src.orders.infrastructure.persistence.repositories.order_repository import OrderRepository


async def _buyer(session, email):
    return await UserRepository(session).create(
        {
            "name": email.split("@")[0],
            "email": email,
            "password": "hash",
            "phone": "1",
            "address": "somewhere",
            "answer": "a",
        }
    )


async def _product(session):
    category = await CategoryRepository(session).create("Books", "books")
    return await ProductRepository(session).create(
        {
            "name": "Clean Code",
            "slug": "clean-code",
            "description": "A handbook",
            "price": 30.0,
            "category_id": category.id,
            "quantity": 5,
        }
    )


async def test_create_expands_buyer_and_products(session):
    buyer = await _buyer(session, "ann@example.test")
    product = await _product(session)

    order = await OrderRepository(session).create(buyer.id, [product.id])

    assert order.status == "Not Processed"
    assert order.buyer.name == "ann"
    assert [p.id for p in order.products] == [product.id]
    body = order.to_dict()
    assert body["buyer"] == {"id": str(buyer.id), "name": "ann"}
    assert "category" not in body["products"][0]


async def test_find_by_buyer(session):
    ann = await _buyer(session, "ann@example.test")
    bob = await _buyer(session, "bob@example.test")
    product = await _product(session)
    orders = OrderRepository(session)
    await orders.create(ann.id, [product.id])
    await orders.create(bob.id, [product.id])
    await orders.create(ann.id, [product.id])

    assert len(await orders.find(buyer_id=ann.id)) == 2
    assert len(await orders.find(buyer_id=bob.id)) == 1


async def test_find_newest_first(session):
    ann = await _buyer(session, "ann@example.test")
    product = await _product(session)
    orders = OrderRepository(session)
    first = await orders.create(ann.id, [product.id], status="Shipped")
    second = await orders.create(ann.id, [product.id])

    listed = await orders.find(order_by="created_at", descending=True)

    assert [o.id for o in listed] == [second.id, first.id]


async def test_status_update_changes_only_status(session):
    ann = await _buyer(session, "ann@example.test")
    product = await _product(session)
    orders = OrderRepository(session)
    order = await orders.create(ann.id, [product.id])

    updated = await orders.update_by_id(order.id, {"status": "deliverd"}, return_new=True)

    assert updated.status == "deliverd"
    assert updated.buyer_id == order.buyer_id
    assert [p.id for p in updated.products] == [product.id]
    assert updated.created_at == order.created_at


async def test_status_update_of_unknown_order(session):
    assert await OrderRepository(session).update_by_id(uuid4(), {"status": "x"}, return_new=True) is None
