"""Rate limiting for the translation endpoints (slowapi)."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

# A page load fetches the client-side table once
TRANSLATIONS_RATE_LIMIT = "120/minute"
RETRY_AFTER_SECONDS = 60

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Answer throttled translation requests with 429 and a retry hint."""
    if not isinstance(exc, RateLimitExceeded):
        raise exc
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many translation requests"},
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


def setup_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
