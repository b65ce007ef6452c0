"""
Logging Middleware
Logs every API call with a request id and its duration
"""

import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from satlogix.utils.logger import setup_logger

logger = setup_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request_logger = logger.bind(request_id=request_id)
        start_time = time.time()

        request_logger.info(
            f"[{request_id}] {request.method} {request.url.path} | "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )

        try:
            response = await call_next(request)
        except Exception:
            duration = time.time() - start_time
            request_logger.exception(
                f"[{request_id}] {request.method} {request.url.path} failed after {duration:.3f}s"
            )
            raise

        duration = time.time() - start_time
        log = request_logger.warning if response.status_code >= 500 else request_logger.info
        log(
            f"[{request_id}] {request.method} {request.url.path} | "
            f"Status: {response.status_code} | Duration: {duration:.3f}s"
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response
