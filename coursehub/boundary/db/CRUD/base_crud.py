"""
Generic persistence helpers shared by the course platform CRUD classes.

Every method works inside the caller's transaction: writes are flushed so
generated ids and defaults are visible, but never committed. Services
decide when a unit of work (for example a course with all of its
children) is committed or rolled back.

Dependencies: sqlalchemy
System role: Foundation for course, curriculum and progress persistence
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic CRUD bound to one ORM model.

    Model-specific subclasses add the lookups their aggregate needs
    (by slug, by (user, course), by section) on top of these primitives.

    Attributes:
        model: ORM class rows are read from and written to
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs: Any) -> ModelT:
        """
        Insert a row and return it with generated id and timestamps.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            The persisted instance
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Return the row with the given primary key, or None."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_one_where(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
    ) -> ModelT | None:
        """
        Return the single row matching all criteria, or None.

        Intended for lookups backed by a unique constraint, such as
        (user_id, course_id) on enrollments.
        """
        result = await session.execute(select(self.model).where(*criteria))
        return result.scalar_one_or_none()

    async def update(
        self,
        session: AsyncSession,
        instance: ModelT,
        **kwargs: Any,
    ) -> ModelT:
        """
        Apply a partial update to a loaded row.

        Only the given fields change; onupdate hooks such as updated_at are
        picked up by the refresh.
        """
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_where(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
    ) -> int:
        """
        Bulk delete the rows matching all criteria.

        Used for the explicit cascades of course and curriculum deletes.

        Returns:
            Number of deleted rows
        """
        result = await session.execute(delete(self.model).where(*criteria))
        return result.rowcount

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete one row by primary key; False when nothing matched."""
        return await self.delete_where(session, self.model.id == id) > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """Check whether a row with the given primary key exists."""
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
