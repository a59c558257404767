"""Utility helper functions."""

from app.utils.helpers import format_datetime, get_summary, host, today_str

__all__ = ["format_datetime", "get_summary", "host", "today_str"]
