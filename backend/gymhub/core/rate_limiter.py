"""
Rate Limiting for the GymHub API
================================
Implements rate limiting using slowapi. Storage is in-process memory by
default; point RATE_LIMIT_STORAGE_URI at Redis when running several workers.

- Every route: RATE_LIMIT_PER_MINUTE per client (via SlowAPIMiddleware)
- /auth/signin and /auth/signup: AUTH_RATE_LIMIT (brute force protection)
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from gymhub.core.config import settings
from gymhub.core.exceptions import InvalidTokenError
from gymhub.core.logging_config import logger
from gymhub.core.security import verify_token


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key.

    Requests carrying a valid bearer token are keyed by the account id inside
    it; everything else falls back to the client address. The token is read
    here because SlowAPIMiddleware runs before any route dependency.
    """
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token:
        try:
            return f"user:{verify_token(token)}"
        except InvalidTokenError:
            pass
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


def auth_rate_limit():
    """Rate limit for credential endpoints"""
    return limiter.limit(settings.AUTH_RATE_LIMIT, key_func=get_user_identifier)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Render 429 in the same {"message"} envelope as every other error"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_user_identifier(request)}: {exc.detail}"
    )

    return JSONResponse(
        status_code=429,
        content={"message": f"Too many requests. Limit: {exc.detail}"},
        headers={"Retry-After": "60"}
    )
