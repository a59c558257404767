# app/managers/rate_limiter.py

"""Rate limiter configuration using slowapi."""

from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from app.configs import LimiterConfig
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Uses API key from header if available, otherwise falls back to IP address.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle rate limit exceeded exceptions.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        JSON response with error details.
    """
    http_exc = cast(RateLimitExceeded, exc)
    response = _rate_limit_exceeded_handler(request, http_exc)
    logger.warning(f"Rate limit exceeded for ip: {host(request)} at {request.url.path}")
    content = {
        "detail": "Rate limit exceeded",
        "allowed_requests": http_exc.detail,
    }
    if retry_after := response.headers.get("retry-after"):
        content["retry_after"] = f"{retry_after} seconds"
    return ORJSONResponse(status_code=HTTP_429_TOO_MANY_REQUESTS, content=content)
