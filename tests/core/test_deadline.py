"""
Test suite for operation deadlines.

System role: Verification of cancellation and timeout reporting
"""

import asyncio

import pytest

from coursehub.core.deadline import deadline
from coursehub.core.exceptions import NotFoundError, OperationTimeoutError


class TestDeadline:
    """Test suite for the deadline() context manager."""

    @pytest.mark.asyncio
    async def test_block_finishing_in_time_is_untouched(self) -> None:
        async with deadline(1.0, "fast"):
            await asyncio.sleep(0)

    @pytest.mark.asyncio
    async def test_expired_deadline_raises_operation_timeout(self) -> None:
        """Test expiry cancels the block and surfaces OperationTimeoutError."""
        # Arrange
        reached_end = False

        # Act
        with pytest.raises(OperationTimeoutError) as exc_info:
            async with deadline(0.01, "slow_query"):
                await asyncio.sleep(1)
                reached_end = True

        # Assert
        assert not reached_end
        assert exc_info.value.details["operation"] == "slow_query"
        assert not isinstance(exc_info.value, NotFoundError)

    @pytest.mark.asyncio
    async def test_none_disables_the_deadline(self) -> None:
        async with deadline(None, "unbounded"):
            await asyncio.sleep(0.01)

    @pytest.mark.asyncio
    async def test_other_errors_pass_through(self) -> None:
        with pytest.raises(KeyError):
            async with deadline(1.0, "failing"):
                raise KeyError("boom")
