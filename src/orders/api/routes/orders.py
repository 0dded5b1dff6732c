# src/orders/api/routes/orders.py

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.identity.api.dependencies.auth import CurrentUser, require_admin, require_sign_in
from src.orders.api.dependencies import get_order_service
from src.orders.api.schemas import OrderStatusRequest
from src.orders.application.services.order_service import OrderService
from src.shared.http.responses import to_json_response

# Order routes share the /auth prefix with the account routes.
router = APIRouter(prefix="/auth", tags=["Orders"])

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.get("/orders")
async def my_orders(
    current_user: Annotated[CurrentUser, Depends(require_sign_in)],
    service: OrderServiceDep,
) -> JSONResponse:
    """Orders placed by the caller."""
    return to_json_response(await service.orders_for(current_user.user_id))


@router.get("/all-orders")
async def all_orders(
    admin: Annotated[CurrentUser, Depends(require_admin)],
    service: OrderServiceDep,
) -> JSONResponse:
    """Every order, newest first."""
    return to_json_response(await service.all_orders(requested_by=admin.user_id))


@router.put("/order-status/{order_id}")
async def set_order_status(
    order_id: UUID,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    service: OrderServiceDep,
    payload: Optional[OrderStatusRequest] = None,
) -> JSONResponse:
    payload = payload or OrderStatusRequest()
    result = await service.set_status(order_id, payload.status, issued_by=admin.user_id)
    return to_json_response(result)
