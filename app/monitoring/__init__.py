"""Structured logging for the Bloglist backend."""

from app.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    get_request_id,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
