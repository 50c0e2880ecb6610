"""Structured logging setup and request tracking."""

from lowcode.core.logging.middleware import RequestLoggingMiddleware, get_client_ip
from lowcode.core.logging.setup import configure_logging


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]
