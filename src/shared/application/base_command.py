"""
Base Command Contract for CQRS
All commands (write operations) inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class BaseCommand:
    """
    Base class for all commands in the system.

    Commands represent write operations (register, update profile, change
    order status). They are immutable and carry the raw request values; the
    handler owns validation so that missing fields produce workflow-specific
    messages.

    Example:
        @dataclass(frozen=True)
        class RegisterUserCommand(BaseCommand):
            email: str | None = None
            password: str | None = None
    """

    # Caller identity resolved by the HTTP layer, when the route is protected
    issued_by: UUID | None = field(default=None, kw_only=True)


def is_blank(value: Any) -> bool:
    """True for values a workflow treats as "not supplied" (None or empty string)."""
    return value is None or value == ""
