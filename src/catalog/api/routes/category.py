# src/catalog/api/routes/category.py

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.catalog.api.dependencies import get_category_service
from src.catalog.api.schemas import CategoryRequest
from src.catalog.application.services.category_service import CategoryService
from src.identity.api.dependencies.auth import CurrentUser, require_admin
from src.shared.http.responses import to_json_response

router = APIRouter(prefix="/category", tags=["Catalog:Category"])

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
AdminDep = Annotated[CurrentUser, Depends(require_admin)]


@router.post("/create-category")
async def create_category(
    admin: AdminDep,
    service: CategoryServiceDep,
    payload: Optional[CategoryRequest] = None,
) -> JSONResponse:
    payload = payload or CategoryRequest()
    return to_json_response(await service.create(payload.name, issued_by=admin.user_id))


@router.put("/update-category/{category_id}")
async def update_category(
    category_id: UUID,
    admin: AdminDep,
    service: CategoryServiceDep,
    payload: Optional[CategoryRequest] = None,
) -> JSONResponse:
    payload = payload or CategoryRequest()
    return to_json_response(
        await service.update(category_id, payload.name, issued_by=admin.user_id)
    )


@router.get("/get-category")
async def list_categories(service: CategoryServiceDep) -> JSONResponse:
    return to_json_response(await service.list_all())


@router.get("/single-category/{slug}")
async def single_category(slug: str, service: CategoryServiceDep) -> JSONResponse:
    return to_json_response(await service.get_by_slug(slug))


@router.delete("/delete-category/{category_id}")
async def delete_category(
    category_id: UUID,
    admin: AdminDep,
    service: CategoryServiceDep,
) -> JSONResponse:
    return to_json_response(await service.delete(category_id, issued_by=admin.user_id))
