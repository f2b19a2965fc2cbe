"""
Rate Limiting Service

Implements rate limiting using slowapi.

Key Features:
=============
1. IP-based rate limiting, proxy-header aware
2. Separate limits for read and write endpoints
3. Pluggable storage (in-memory by default, redis:// for several instances)
4. JSON error responses in the API's `{"message": ...}` format

Rate Limit Tiers:
=================
- Default (reads): settings.rate_limit_default
- Writes (orders, catalog changes): settings.rate_limit_write
- Registration/login: fixed, stricter limits on the auth routes
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from library_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Checks X-Forwarded-For (first entry is the client), then X-Real-IP,
    then falls back to the direct connection address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create and configure the rate limiter from settings."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 with a Retry-After header."""
    limit_detail = str(exc.detail)

    response = JSONResponse(
        status_code=429,
        content={
            "message": "Too many requests. Please slow down.",
            "detail": limit_detail,
        },
    )
    response.headers["Retry-After"] = str(60)
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(
        f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}"
    )

    return response
