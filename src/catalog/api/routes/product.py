# src/catalog/api/routes/product.py

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.catalog.api.dependencies import get_product_service
from src.catalog.api.schemas import ProductFilterRequest, ProductRequest
from src.catalog.application.services.product_service import ProductService
from src.identity.api.dependencies.auth import CurrentUser, require_admin
from src.shared.http.responses import to_json_response

router = APIRouter(prefix="/product", tags=["Catalog:Product"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
AdminDep = Annotated[CurrentUser, Depends(require_admin)]


@router.post("/create-product")
async def create_product(
    admin: AdminDep,
    service: ProductServiceDep,
    payload: Optional[ProductRequest] = None,
) -> JSONResponse:
    payload = payload or ProductRequest()
    result = await service.create(issued_by=admin.user_id, **payload.model_dump())
    return to_json_response(result)


@router.put("/update-product/{pid}")
async def update_product(
    pid: UUID,
    admin: AdminDep,
    service: ProductServiceDep,
    payload: Optional[ProductRequest] = None,
) -> JSONResponse:
    payload = payload or ProductRequest()
    result = await service.update(pid, issued_by=admin.user_id, **payload.model_dump())
    return to_json_response(result)


@router.get("/get-product")
async def list_products(service: ProductServiceDep) -> JSONResponse:
    """Twelve newest products."""
    return to_json_response(await service.list_recent())


@router.get("/get-product/{slug}")
async def single_product(slug: str, service: ProductServiceDep) -> JSONResponse:
    return to_json_response(await service.get_by_slug(slug))


@router.delete("/delete-product/{pid}")
async def delete_product(pid: UUID, admin: AdminDep, service: ProductServiceDep) -> JSONResponse:
    return to_json_response(await service.delete(pid, issued_by=admin.user_id))


@router.post("/product-filters")
async def filter_products(
    service: ProductServiceDep,
    payload: Optional[ProductFilterRequest] = None,
) -> JSONResponse:
    payload = payload or ProductFilterRequest()
    return to_json_response(await service.filter(payload.checked, payload.radio))


@router.get("/product-count")
async def product_count(service: ProductServiceDep) -> JSONResponse:
    return to_json_response(await service.count())


@router.get("/related-product/{pid}/{cid}")
async def related_products(pid: UUID, cid: UUID, service: ProductServiceDep) -> JSONResponse:
    return to_json_response(await service.related(pid, cid))


@router.get("/product-category/{slug}")
async def products_by_category(slug: str, service: ProductServiceDep) -> JSONResponse:
    return to_json_response(await service.by_category(slug))


@router.get("/search/{keyword}")
async def search_products(keyword: str, service: ProductServiceDep) -> JSONResponse:
    """Products whose name or description contains `keyword`."""
    return to_json_response(await service.search(keyword))
