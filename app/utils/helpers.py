from collections.abc import MutableMapping
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(DATE_FORMAT)


def format_datetime(value: datetime | None) -> str | None:
    """Render a stored timestamp in local time, ``None`` stays ``None``."""
    if value is None:
        return None
    # SQLite hands timestamps back naive; they were written in UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone().strftime(DATE_FORMAT)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
