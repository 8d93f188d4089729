import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Registra uma linha por requisição: ip, método, uri, status e latência."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # exceção não tratada também é registrada, como 500
            self._log(request, status_code, (time.perf_counter() - start) * 1000)

    @staticmethod
    def _log(request: Request, status_code: int, latency_ms: float):
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        logger.info(
            '%s "%s %s" %d %.2fms',
            request.client.host if request.client else "-",
            request.method,
            uri,
            status_code,
            latency_ms,
        )
