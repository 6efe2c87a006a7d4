"""
Service error handling for routers.

Provides a decorator that maps the service exception hierarchy to
HTTPExceptions with consistent logging across all endpoints.

Dependencies: fastapi, coursehub.core.exceptions
System role: Exception to HTTP status translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from coursehub.core.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    OperationTimeoutError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_DETAIL = "An internal error occurred"


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with their details
    - Mapping the exception hierarchy to HTTP status codes
    - Hiding internal error details from clients (500)
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ConflictError as e:
            logger.warning("Conflicting request", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except InvalidStateError as e:
            logger.warning("Invalid request", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except UnauthorizedError as e:
            logger.warning("Forbidden operation", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

        except OperationTimeoutError as e:
            logger.error("Operation timed out", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=e.message)

        except Exception as e:
            logger.exception(
                "Unexpected failure in service operation",
                extra={"error": str(e), "endpoint": func.__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

    return wrapper  # type: ignore
