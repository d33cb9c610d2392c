import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        path = request.url.path
        method = request.method

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            logger.error(
                f"[{request_id}] {method} {path} - ERROR ({duration_ms}ms)",
                extra={"request_id": request_id, "error": str(exc)}
            )
            raise

        duration_ms = round((time.time() - start_time) * 1000, 2)
        status_code = response.status_code

        cache_status = getattr(request.state, "cache_status", None)
        cache_msg = f" [CACHE: {cache_status}]" if cache_status else ""

        log_level = logging.WARNING if status_code >= 400 else logging.INFO
        logger.log(
            log_level,
            f"[{request_id}] {method} {path} - {status_code}{cache_msg} ({duration_ms}ms)",
            extra={"request_id": request_id, "status_code": status_code, "duration_ms": duration_ms}
        )

        response.headers["X-Request-ID"] = request_id
        return response
