"""
Logger configuration.

Provides configured logging with ISO timestamps and correlation ID injection.

Dependencies: logging (stdlib), coursehub.configs
System role: Centralized logging configuration
"""

import logging
import sys

from coursehub.configs.observability import ObservabilitySettings
from coursehub.observability.correlation import get_correlation_id


class CorrelationIdFilter(logging.Filter):
    """Attach the current correlation ID to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(settings: ObservabilitySettings | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and correlation IDs.

    Args:
        settings: Log levels (defaults to environment configuration)
    """
    settings = settings or ObservabilitySettings()

    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root_logger.setLevel(settings.level.upper())
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(settings.sql_level.upper())
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
