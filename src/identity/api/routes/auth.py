# src/identity/api/routes/auth.py

from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.identity.api.dependencies.auth import (
    CurrentUser,
    get_auth_service,
    require_admin,
    require_sign_in,
)
from src.identity.api.schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
)
from src.identity.application.services.auth_service import AuthService
from src.identity.domain import messages
from src.shared.http.responses import to_json_response

router = APIRouter(prefix="/auth", tags=["Identity:Auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/register")
async def register(
    auth_service: AuthServiceDep,
    payload: Optional[RegisterRequest] = None,
) -> JSONResponse:
    """Open a buyer account (201) or explain why not."""
    payload = payload or RegisterRequest()
    result = await auth_service.register(**payload.model_dump())
    return to_json_response(result)


@router.post("/login")
async def login(
    auth_service: AuthServiceDep,
    payload: Optional[LoginRequest] = None,
) -> JSONResponse:
    """Authenticate and issue a session token."""
    payload = payload or LoginRequest()
    result = await auth_service.login(email=payload.email, password=payload.password)
    return to_json_response(result)


@router.post("/forgot-password")
async def forgot_password(
    auth_service: AuthServiceDep,
    payload: Optional[ForgotPasswordRequest] = None,
) -> JSONResponse:
    """Reset a password after matching email and security answer."""
    payload = payload or ForgotPasswordRequest()
    result = await auth_service.forgot_password(
        email=payload.email,
        answer=payload.answer,
        new_password=payload.new_password,
    )
    return to_json_response(result)


@router.get("/test", dependencies=[Depends(require_admin)])
async def protected_test() -> str:
    return messages.PROTECTED_ROUTES


@router.get("/user-auth", dependencies=[Depends(require_sign_in)])
async def user_auth() -> dict:
    return {"ok": True}


@router.get("/admin-auth", dependencies=[Depends(require_admin)])
async def admin_auth() -> dict:
    return {"ok": True}


@router.put("/profile")
async def update_profile(
    auth_service: AuthServiceDep,
    current_user: Annotated[CurrentUser, Depends(require_sign_in)],
    payload: Optional[UpdateProfileRequest] = None,
) -> JSONResponse:
    """Edit the caller's own name, password, phone or address."""
    payload = payload or UpdateProfileRequest()
    result = await auth_service.update_profile(
        current_user.user_id,
        **payload.model_dump(),
    )
    return to_json_response(result)
