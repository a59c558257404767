# app/middleware/middleware.py
"""
Middleware components for the Bloglist backend.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan handler that prepares and releases the
database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.configs import settings
from app.db import close_db, init_db
from app.monitoring import bind_request_id, clear_context, get_logger
from app.utils.helpers import get_summary, host

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    logger.info(f"Starting {app.title}...")

    try:
        await init_db()
        logger.info("Services initialized successfully")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    await close_db()


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing, tagging both with a request ID."""

        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {duration:.2f}s",
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_context()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
