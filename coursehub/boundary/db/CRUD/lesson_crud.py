"""
Lesson CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Lesson persistence operations
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.lesson_model import LessonModel
from coursehub.boundary.db.models.section_model import SectionModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class LessonCRUD(BaseCRUD[LessonModel]):
    """
    CRUD operations for LessonModel.

    Lessons belong to a section; course-level queries join through
    course_sections.
    """

    def __init__(self) -> None:
        """Initialize LessonCRUD with LessonModel."""
        super().__init__(LessonModel)

    async def get_course_id(self, session: AsyncSession, lesson_id: UUID) -> UUID | None:
        """
        Resolve the course a lesson belongs to.

        Args:
            session: Async database session
            lesson_id: Lesson UUID

        Returns:
            Course UUID, or None if the lesson does not exist
        """
        stmt = (
            select(SectionModel.course_id)
            .join(LessonModel, LessonModel.section_id == SectionModel.id)
            .where(LessonModel.id == lesson_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        """Count the lessons across all sections of a course."""
        stmt = (
            select(func.count(LessonModel.id))
            .join(SectionModel, LessonModel.section_id == SectionModel.id)
            .where(SectionModel.course_id == course_id)
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def delete_by_sections(self, session: AsyncSession, section_ids: list[UUID]) -> int:
        """
        Delete every lesson of the given sections.

        Args:
            session: Async database session
            section_ids: Section UUIDs

        Returns:
            Number of deleted lessons
        """
        if not section_ids:
            return 0
        return await self.delete_where(session, LessonModel.section_id.in_(section_ids))


lesson_crud = LessonCRUD()
