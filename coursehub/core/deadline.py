"""
Operation deadlines.

Wraps asyncio.timeout so that an expired deadline cancels the pending
database call and surfaces as OperationTimeoutError.

Dependencies: asyncio
System role: Cancellation of long-running service operations
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from coursehub.core.exceptions import OperationTimeoutError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def deadline(timeout: float | None, operation: str) -> AsyncIterator[None]:
    """
    Run the enclosed block under a deadline.

    Args:
        timeout: Seconds before the block is cancelled (None disables the deadline)
        operation: Operation name used in logs and in the raised error

    Raises:
        OperationTimeoutError: If the block does not finish in time

    Usage:
        async with deadline(5.0, "enroll"):
            await enrollment_crud.create(db, ...)
    """
    try:
        async with asyncio.timeout(timeout):
            yield
    except TimeoutError as e:
        logger.warning(
            "Operation deadline exceeded",
            extra={"operation": operation, "timeout_seconds": timeout},
        )
        raise OperationTimeoutError(operation, timeout) from e
