"""
Workflow Response
Structured result returned by every command/query handler
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastapi import status


@dataclass(frozen=True)
class WorkflowResponse:
    """
    Outcome of one workflow invocation.

    Business outcomes such as "already registered" or "invalid password" are
    ordinary responses with `success: False` in the body, not errors.

    Attributes:
        status_code: HTTP status the boundary layer should use
        body: JSON-serialisable payload (dict, list, str or None)
    """

    status_code: int
    body: Any = field(default=None)

    @property
    def success(self) -> bool | None:
        """`success` flag of a dict body, None for other payloads."""
        if isinstance(self.body, dict):
            return self.body.get("success")
        return None

    @classmethod
    def ok(cls, body: Any, status_code: int = status.HTTP_200_OK) -> WorkflowResponse:
        return cls(status_code=status_code, body=body)

    @classmethod
    def created(cls, body: Any) -> WorkflowResponse:
        return cls(status_code=status.HTTP_201_CREATED, body=body)

    @classmethod
    def failure(
        cls,
        status_code: int,
        message: str,
        **extra: Any,
    ) -> WorkflowResponse:
        """Negative outcome with the standard `{success: False, message}` body."""
        body: dict[str, Any] = {"success": False, "message": message}
        body.update(extra)
        return cls(status_code=status_code, body=body)
