"""
Lesson progress CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Per-lesson progress persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.lesson_model import LessonModel
from coursehub.boundary.db.models.lesson_progress_model import LessonProgressModel
from coursehub.boundary.db.models.section_model import SectionModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class LessonProgressCRUD(BaseCRUD[LessonProgressModel]):
    """
    CRUD operations for LessonProgressModel.

    At most one row exists per (user_id, lesson_id); completion is upserted.
    """

    def __init__(self) -> None:
        """Initialize LessonProgressCRUD with LessonProgressModel."""
        super().__init__(LessonProgressModel)

    async def get_by_user_and_lesson(
        self,
        session: AsyncSession,
        user_id: str,
        lesson_id: UUID,
    ) -> LessonProgressModel | None:
        """
        Retrieve the progress row of a user for a lesson.

        Args:
            session: Async database session
            user_id: Opaque user id
            lesson_id: Lesson UUID

        Returns:
            LessonProgressModel if recorded, None otherwise
        """
        return await self.get_one_where(
            session,
            LessonProgressModel.user_id == user_id,
            LessonProgressModel.lesson_id == lesson_id,
        )

    async def upsert_completed(
        self,
        session: AsyncSession,
        user_id: str,
        lesson_id: UUID,
        now: datetime,
    ) -> LessonProgressModel:
        """
        Mark a lesson completed for a user, inserting the row if missing.

        Repeated calls keep a single row and refresh completed_at.

        Args:
            session: Async database session
            user_id: Opaque user id
            lesson_id: Lesson UUID
            now: Completion timestamp

        Returns:
            The stored progress row
        """
        existing = await self.get_by_user_and_lesson(session, user_id, lesson_id)
        if existing is not None:
            return await self.update(
                session,
                existing,
                completed=True,
                completed_at=now,
                last_watched_at=now,
            )
        return await self.create(
            session,
            user_id=user_id,
            lesson_id=lesson_id,
            completed=True,
            completed_at=now,
            last_watched_at=now,
        )

    async def completed_lesson_ids(
        self,
        session: AsyncSession,
        user_id: str,
        course_id: UUID,
    ) -> set[UUID]:
        """
        Return the ids of the lessons of a course the user has completed.

        Args:
            session: Async database session
            user_id: Opaque user id
            course_id: Course UUID

        Returns:
            Set of completed lesson UUIDs
        """
        stmt = (
            select(LessonProgressModel.lesson_id)
            .join(LessonModel, LessonModel.id == LessonProgressModel.lesson_id)
            .join(SectionModel, SectionModel.id == LessonModel.section_id)
            .where(
                LessonProgressModel.user_id == user_id,
                LessonProgressModel.completed.is_(True),
                SectionModel.course_id == course_id,
            )
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def count_completed_for_course(
        self,
        session: AsyncSession,
        user_id: str,
        course_id: UUID,
    ) -> int:
        """Count the completed lessons of a course for a user."""
        stmt = (
            select(func.count(LessonProgressModel.id))
            .join(LessonModel, LessonModel.id == LessonProgressModel.lesson_id)
            .join(SectionModel, SectionModel.id == LessonModel.section_id)
            .where(
                LessonProgressModel.user_id == user_id,
                LessonProgressModel.completed.is_(True),
                SectionModel.course_id == course_id,
            )
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def delete_by_lesson(self, session: AsyncSession, lesson_id: UUID) -> int:
        """Delete all progress rows of a lesson."""
        return await self.delete_where(session, LessonProgressModel.lesson_id == lesson_id)

    async def delete_by_sections(self, session: AsyncSession, section_ids: list[UUID]) -> int:
        """
        Delete all progress rows of the lessons in the given sections.

        Args:
            session: Async database session
            section_ids: Section UUIDs

        Returns:
            Number of deleted progress rows
        """
        if not section_ids:
            return 0
        lesson_ids = select(LessonModel.id).where(LessonModel.section_id.in_(section_ids))
        return await self.delete_where(session, LessonProgressModel.lesson_id.in_(lesson_ids))


lesson_progress_crud = LessonProgressCRUD()
