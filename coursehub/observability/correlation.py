"""
Request correlation IDs.

The ID of the request being served lives in a ContextVar, so every task
spawned for that request logs the same value.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

MAX_CORRELATION_ID_LENGTH = 128

correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def _normalize(correlation_id: str | None) -> str:
    value = (correlation_id or "").strip()[:MAX_CORRELATION_ID_LENGTH]
    return value or uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Blank input gets a fresh ID; overly long input is truncated.

    Returns:
        str: The ID now bound
    """
    value = _normalize(correlation_id)
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str | None:
    """Correlation ID of the current request, None outside a request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set(None)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation ID for the duration of a block, restoring the previous one after."""
    token = correlation_id_ctx.set(_normalize(correlation_id))
    try:
        yield correlation_id_ctx.get()
    finally:
        correlation_id_ctx.reset(token)
