"""Request logging middleware.

Logs method, path, status code, duration and client address of every request.
Request bodies are never logged; sensitive headers are masked.
"""

import time
import logging
from typing import Mapping, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({'authorization', 'cookie', 'x-api-key', 'api-key', 'apikey'})
MASK = '***MASKED***'


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy `headers`, replacing credential-bearing values with a mask."""
    return {
        name: MASK if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def client_address(request: Request) -> str:
    """Best guess at the caller's address, honouring proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    return request.headers.get("x-real-ip") or (
        request.client.host if request.client else "unknown"
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that writes one log line per request."""

    async def dispatch(self, request: Request, call_next):
        """Process the request and log its outcome.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware or endpoint in the chain

        Returns:
            HTTP response
        """
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"{request.method} {request.url.path} failed after {time.time() - start_time:.4f}s "
                f"client={client_address(request)}"
            )
            raise

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{time.time() - start_time:.4f}s client={client_address(request)}"
        )
        logger.debug(f"Request headers: {mask_headers(request.headers)}")
        return response
