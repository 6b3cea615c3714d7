"""Utility functions package."""

from .logger import get_logger
from .cors_response import (
    cors_response_on_call,
    preflight_response,
    add_cors_headers,
    create_cors_response,
)

__all__ = [
    "get_logger",
    "cors_response_on_call",
    "preflight_response",
    "add_cors_headers",
    "create_cors_response",
]
