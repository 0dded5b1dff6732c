from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.shared.infrastructure.observability.logger import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"

log = get_logger("http")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a correlation id and writes one access log line.

    - Incoming X-Request-ID is reused, otherwise a uuid4 is generated.
    - request_id / path / method are bound into the structlog context.
    - The id is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        clear_context()
        bind_context(request_id=request_id, path=request.url.path, method=request.method)

        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            log.info(
                "http_access",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
            )
            clear_context()
