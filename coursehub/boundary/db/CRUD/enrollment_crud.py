"""
Enrollment CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Enrollment persistence operations
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.boundary.db.models.enrollment_model import EnrollmentModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """
    CRUD operations for EnrollmentModel.

    An enrollment is addressed by (user_id, course_id); the pair is unique.
    """

    def __init__(self) -> None:
        """Initialize EnrollmentCRUD with EnrollmentModel."""
        super().__init__(EnrollmentModel)

    async def get_by_user_and_course(
        self,
        session: AsyncSession,
        user_id: str,
        course_id: UUID,
    ) -> EnrollmentModel | None:
        """
        Retrieve the enrollment of a user in a course.

        Args:
            session: Async database session
            user_id: Opaque user id
            course_id: Course UUID

        Returns:
            EnrollmentModel if enrolled, None otherwise
        """
        return await self.get_one_where(
            session,
            EnrollmentModel.user_id == user_id,
            EnrollmentModel.course_id == course_id,
        )

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[EnrollmentModel]:
        """
        Retrieve all enrollments of a user, newest first, with the course loaded.

        Args:
            session: Async database session
            user_id: Opaque user id

        Returns:
            Sequence of EnrollmentModels
        """
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.user_id == user_id)
            .options(selectinload(EnrollmentModel.course))
            .order_by(EnrollmentModel.enrolled_at.desc(), EnrollmentModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def set_progress(
        self,
        session: AsyncSession,
        enrollment: EnrollmentModel,
        progress: int,
        now: datetime,
    ) -> EnrollmentModel:
        """
        Store a recomputed progress percentage on an enrollment.

        completed_at is stamped the first time progress reaches 100 and
        is never cleared afterwards.

        Args:
            session: Async database session
            enrollment: Persistent enrollment
            progress: Percentage in [0, 100]
            now: Timestamp used for completed_at

        Returns:
            The updated enrollment
        """
        fields: dict = {"progress": progress}
        if progress >= 100 and enrollment.completed_at is None:
            fields["completed_at"] = now
        return await self.update(session, enrollment, **fields)

    async def delete_by_course(self, session: AsyncSession, course_id: UUID) -> int:
        """Delete every enrollment in a course and return how many were removed."""
        return await self.delete_where(session, EnrollmentModel.course_id == course_id)


enrollment_crud = EnrollmentCRUD()
