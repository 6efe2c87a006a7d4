"""
Section CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Curriculum section persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.boundary.db.models.section_model import SectionModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class SectionCRUD(BaseCRUD[SectionModel]):
    """CRUD operations for SectionModel."""

    def __init__(self) -> None:
        """Initialize SectionCRUD with SectionModel."""
        super().__init__(SectionModel)

    async def get_by_course_with_lessons(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> Sequence[SectionModel]:
        """
        Retrieve the sections of a course with their lessons.

        Sections and lessons are ordered by order_index, ties by creation time.

        Args:
            session: Async database session
            course_id: Course UUID

        Returns:
            Sequence of SectionModels with lessons loaded
        """
        stmt = (
            select(SectionModel)
            .where(SectionModel.course_id == course_id)
            .options(selectinload(SectionModel.lessons))
            .order_by(SectionModel.order_index, SectionModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_ids_by_course(
        self,
        session: AsyncSession,
        course_id: UUID,
    ) -> list[UUID]:
        """Return the ids of all sections of a course."""
        stmt = select(SectionModel.id).where(SectionModel.course_id == course_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        """Delete every section of a course and return how many were removed."""
        return await self.delete_where(session, SectionModel.course_id == course_id)


section_crud = SectionCRUD()
