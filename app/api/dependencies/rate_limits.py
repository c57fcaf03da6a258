"""Rate limiting (slowapi) for the public endpoints."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address


def client_address(request: Request) -> str:
    """Rate limit key: the first X-Forwarded-For hop, else the peer address."""
    forwarded_for = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded_for.split(",")[0].strip()
    return first_hop or get_remote_address(request)


limiter = Limiter(key_func=client_address)


async def rate_limit_handler(request: Request, exc: Exception) -> JSONResponse:
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else None
    return JSONResponse(
        status_code=429,
        content={"message": "Rate limit exceeded", "limit": detail},
    )


def setup_rate_limiter(app: FastAPI, enabled: bool = True) -> Limiter:
    """Attach the shared limiter and its 429 handler to ``app``."""
    limiter.enabled = enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    return limiter