"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # ctx may hold exception instances, which ORJSON cannot serialize
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
