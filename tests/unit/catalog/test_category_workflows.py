import uuid
from unittest.mock import AsyncMock

import pytest

from src.catalog.application.services.category_service import CategoryService
from tests.factories import make_category


@pytest.fixture
def category_repo():
    repo = AsyncMock()
    repo.get_by_name.return_value = None
    return repo


async def test_create_requires_name(category_repo):
    result = await CategoryService(category_repo).create("")

    assert result.status_code == 401
    assert result.body == {"message": "Name is required"}
    category_repo.create.assert_not_awaited()


async def test_create_existing_is_success_noop(category_repo):
    category_repo.get_by_name.return_value = make_category()

    result = await CategoryService(category_repo).create("Books")

    assert result.status_code == 200
    assert result.body == {"success": True, "message": "Category Already Exisits"}
    category_repo.create.assert_not_awaited()


async def test_create_slugifies(category_repo):
    category_repo.create.side_effect = lambda name, slug: make_category(name=name, slug=slug)

    result = await CategoryService(category_repo).create("Home & Garden")

    assert result.status_code == 201
    assert result.body["message"] == "new category created"
    category_repo.create.assert_awaited_once_with("Home & Garden", "home-garden")
    assert result.body["category"]["slug"] == "home-garden"


async def test_update_renames_and_reslugs(category_repo):
    category_id = uuid.uuid4()
    category_repo.update_by_id.return_value = make_category(id=category_id, name="Comics", slug="comics")

    result = await CategoryService(category_repo).update(category_id, "Comics")

    category_repo.update_by_id.assert_awaited_once_with(
        category_id, {"name": "Comics", "slug": "comics"}, return_new=True
    )
    assert result.body["message"] == "Category Updated Successfully"
    assert result.body["category"]["name"] == "Comics"


async def test_update_without_name_fails(category_repo):
    result = await CategoryService(category_repo).update(uuid.uuid4(), None)

    assert result.status_code == 500
    assert result.body["message"] == "Error while updating category"


async def test_list_and_single(category_repo):
    books = make_category()
    category_repo.list_all.return_value = [books]
    category_repo.get_by_slug.return_value = books

    listing = await CategoryService(category_repo).list_all()
    single = await CategoryService(category_repo).get_by_slug("books")

    assert listing.body == {
        "success": True,
        "message": "All Categories List",
        "category": [books.to_dict()],
    }
    assert single.body["message"] == "Get SIngle Category SUccessfully"
    assert single.body["category"] == books.to_dict()


async def test_delete(category_repo):
    category_id = uuid.uuid4()

    result = await CategoryService(category_repo).delete(category_id)

    category_repo.delete_by_id.assert_awaited_once_with(category_id)
    assert result.body == {"success": True, "message": "Categry Deleted Successfully"}


async def test_list_fault(category_repo):
    category_repo.list_all.side_effect = RuntimeError()

    result = await CategoryService(category_repo).list_all()

    assert result.status_code == 500
    assert result.body["message"] == "Error while getting all categories"
