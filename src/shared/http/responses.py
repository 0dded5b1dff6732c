# /src/shared/http/responses.py
"""
HTTP response helpers.

- to_json_response(workflow_response, headers=None)
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from src.shared.application.response import WorkflowResponse


def to_json_response(
    result: WorkflowResponse,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Render a workflow outcome with its own status code and body."""
    return JSONResponse(
        jsonable_encoder(result.body),
        status_code=result.status_code,
        headers=headers or {},
    )
