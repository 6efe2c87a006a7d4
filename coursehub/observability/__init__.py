"""
Observability module.

Provides logging configuration, correlation ID tracking, and request
logging middleware.
"""

from coursehub.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    set_correlation_id,
)
from coursehub.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "set_correlation_id",
]
