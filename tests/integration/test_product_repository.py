from uuid import uuid4

from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)


async def _seed(session):
    categories = CategoryRepository(session)
    products = ProductRepository(session)
    books = await categories.create("Books", "books")
    games = await categories.create("Games", "games")

    catalog = {}
    for name, price, category in (
        ("Clean Code", 30.0, books),
        ("Refactoring", 45.0, books),
        ("SICP", 60.0, books),
        ("Chess Set", 25.0, games),
    ):
        catalog[name] = await products.create(
            {
                "name": name,
                "slug": name.lower().replace(" ", "-"),
                "description": f"{name} description",
                "price": price,
                "category_id": category.id,
                "quantity": 3,
                "shipping": True,
                "photo": b"ignored",
            }
        )
    return products, books, games, catalog


async def test_products_carry_their_category(session):
    products, books, _, _ = await _seed(session)

    product = await products.get_by_slug("clean-code")

    assert product.category is not None
    assert product.category.slug == "books"
    assert product.to_dict()["category"] == books.to_dict()


async def test_list_recent_newest_first_with_limit(session):
    products, _, _, _ = await _seed(session)

    recent = await products.list_recent(2)

    assert [p.name for p in recent] == ["Chess Set", "SICP"]


async def test_filter_by_category_and_price(session):
    products, books, games, _ = await _seed(session)

    by_category = await products.filter([games.id])
    by_price = await products.filter([], (30, 45))
    both = await products.filter([books.id, games.id], (20, 30))
    everything = await products.filter()

    assert {p.name for p in by_category} == {"Chess Set"}
    assert {p.name for p in by_price} == {"Clean Code", "Refactoring"}
    assert {p.name for p in both} == {"Clean Code", "Chess Set"}
    assert len(everything) == 4


async def test_related_excludes_the_product_itself(session):
    products, books, _, catalog = await _seed(session)
    anchor = catalog["Clean Code"]

    related = await products.related(anchor.id, books.id, 3)

    assert {p.name for p in related} == {"Refactoring", "SICP"}
    assert len(await products.related(anchor.id, books.id, 1)) == 1


async def test_count_and_delete(session):
    products, _, _, catalog = await _seed(session)

    assert await products.count() == 4
    assert await products.delete_by_id(catalog["SICP"].id) is True
    assert await products.delete_by_id(uuid4()) is False
    assert await products.count() == 3


async def test_category_lookups(session):
    categories = CategoryRepository(session)
    await categories.create("Home & Garden", "home-garden")

    assert (await categories.get_by_name("Home & Garden")).slug == "home-garden"
    assert (await categories.get_by_slug("home-garden")).name == "Home & Garden"
    assert await categories.get_by_slug("garden") is None
    assert len(await categories.list_all()) == 1


async def test_search_matches_name_or_description_ignoring_case(session):
    products, _, _, _ = await _seed(session)

    assert {p.name for p in await products.search("clean")} == {"Clean Code"}
    assert {p.name for p in await products.search("SET DESC")} == {"Chess Set"}
    assert len(await products.search("description")) == 4
    assert await products.search("100%") == []
