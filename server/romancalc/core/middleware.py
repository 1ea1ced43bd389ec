from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from romancalc.core.context import bind_correlation_id, current_correlation_id, unbind_correlation_id

logger = logging.getLogger("romancalc.request")

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:
        incoming_id = request.headers.get(REQUEST_ID_HEADER.lower())
        token = bind_correlation_id(incoming_id)
        correlation_id = current_correlation_id() or ""

        start_time = time.perf_counter()
        extra = {"path": request.url.path, "method": request.method}
        logger.info("request.start", extra=extra)

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            extra.update({"duration_ms": round(duration_ms, 2)})
            logger.info("request.end", extra=extra)
            unbind_correlation_id(token)

        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
