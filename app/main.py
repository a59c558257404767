# app/main.py

"""Bloglist Backend - blog list management API with like statistics."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import settings
from app.db import ping_db
from app.errors import (
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.monitoring import configure_logging
from app.routes import auth_router, blog_router, user_router
from app.schemas import HealthCheckResponse
from app.utils.helpers import today_str

configure_logging()

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    auth_router,
    user_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (UserAuthenticationError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        API version, overall status and database reachability.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "connected"}
    """
    database_ok = await ping_db()
    health = HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="connected" if database_ok else "unavailable",
    )
    return ORJSONResponse(health.model_dump())


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    response_class=JSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Welcome to Bloglist Backend"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="root_access",
)
@limiter.limit("5/minute")
async def root(request: Request, response: Response) -> JSONResponse:
    """
    Root endpoint.

    Notes
    -----
    Rate limited to 5 requests per minute.
    """
    return JSONResponse(content={"message": f"Welcome to {app.title}"})
