"""
Shared service plumbing.

Holds the request-scoped session and the default operation deadline.

Dependencies: sqlalchemy, coursehub.core.deadline
System role: Base class for use case orchestrators
"""

from contextlib import AbstractAsyncContextManager

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.deadline import deadline


class BaseService:
    """Base for services bound to one database session."""

    def __init__(self, db: AsyncSession, default_timeout: float | None = None) -> None:
        """
        Args:
            db: Async SQLAlchemy session
            default_timeout: Deadline in seconds applied when a call passes none
        """
        self.db = db
        self.default_timeout = default_timeout

    def _deadline(
        self,
        operation: str,
        timeout: float | None = None,
    ) -> AbstractAsyncContextManager[None]:
        return deadline(timeout if timeout is not None else self.default_timeout, operation)
