"""HTTPS brokers package."""

from .health_check import health_check

__all__ = [
    "health_check",
]
