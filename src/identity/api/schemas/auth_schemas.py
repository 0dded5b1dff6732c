"""
Authentication API Schemas

All workflow fields are optional here; presence and length checks belong
to the workflows so that clients get the storefront's own messages.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class RegisterRequest(_Payload):
    """Registration request schema"""

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Login email")
    password: Optional[str] = Field(default=None, description="Plain text password")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    address: Optional[str] = Field(default=None, description="Shipping address")
    answer: Optional[str] = Field(default=None, description="Security answer for recovery")


class LoginRequest(_Payload):
    """Login request schema"""

    email: Optional[str] = Field(default=None, description="User email address")
    password: Optional[str] = Field(default=None, description="User password")


class ForgotPasswordRequest(_Payload):
    """Password recovery request schema"""

    email: Optional[str] = Field(default=None, description="User email address")
    answer: Optional[str] = Field(default=None, description="Security answer")
    new_password: Optional[str] = Field(
        default=None,
        alias="newPassword",
        description="Replacement password",
    )


class UpdateProfileRequest(_Payload):
    """Profile update request schema; empty values keep the stored ones"""

    name: Optional[str] = None
    email: Optional[str] = Field(default=None, description="Ignored; email cannot change")
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
