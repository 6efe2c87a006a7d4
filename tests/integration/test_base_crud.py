"""
Test suite for BaseCRUD generic database operations.

Tests create, get_by_id, update, delete_by_id and exists against a mocked
async session, so only the interaction with the session is verified.

System role: Verification of generic database layer foundation
"""

import uuid
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.models import SectionModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD bound to a concrete model."""
    return BaseCRUD(SectionModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create()."""

    @pytest.mark.asyncio
    async def test_create_adds_flushes_and_refreshes(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test create adds the instance, flushes for the id, then refreshes."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        instance = await base_crud.create(mock_session, title="Basics", order_index=2)

        # Assert
        mock_session.add.assert_called_once_with(instance)
        assert isinstance(instance, SectionModel)
        assert instance.title == "Basics"
        assert call_order == ["flush", "refresh"]

    @pytest.mark.asyncio
    async def test_create_does_not_commit(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test committing is left to the calling service."""
        await base_crud.create(mock_session, title="Basics")

        mock_session.commit.assert_not_called()


class TestBaseCRUDGetByID:
    """Test suite for BaseCRUD.get_by_id()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("found", [True, False])
    async def test_get_by_id_returns_scalar_result(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        found: bool,
    ) -> None:
        # Arrange
        mock_instance = MagicMock(id=sample_id) if found else None
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.get_by_id(mock_session, sample_id)

        # Assert
        assert result is mock_instance
        mock_session.execute.assert_called_once()


class TestBaseCRUDUpdate:
    """Test suite for BaseCRUD.update()."""

    @pytest.mark.asyncio
    async def test_update_sets_fields_and_refreshes(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        # Arrange
        section = SectionModel(title="Old", order_index=0)

        # Act
        result = await base_crud.update(mock_session, section, title="New", order_index=3)

        # Assert
        assert result is section
        assert section.title == "New"
        assert section.order_index == 3
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(section)


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("rowcount", "expected"), [(1, True), (0, False)])
    async def test_delete_reports_whether_a_row_was_removed(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        rowcount: int,
        expected: bool,
    ) -> None:
        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=rowcount))

        assert await base_crud.delete_by_id(mock_session, sample_id) is expected


class TestBaseCRUDExists:
    """Test suite for BaseCRUD.exists()."""

    @pytest.mark.asyncio
    async def test_exists_is_false_without_a_row(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.exists(mock_session, sample_id) is False

    @pytest.mark.asyncio
    async def test_exists_is_true_with_a_row(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=sample_id)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.exists(mock_session, sample_id) is True


class TestBaseCRUDCriteriaHelpers:
    """Test suite for get_one_where() and delete_where()."""

    @pytest.mark.asyncio
    async def test_get_one_where_returns_scalar_result(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.get_one_where(mock_session, SectionModel.title == "Basics")

        assert result is None
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_where_returns_rowcount(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=4))

        deleted = await base_crud.delete_where(mock_session, SectionModel.order_index > 2)

        assert deleted == 4
        mock_session.commit.assert_not_called()
