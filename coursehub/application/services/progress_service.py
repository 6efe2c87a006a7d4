"""
Progress service orchestrator.

Marks lessons complete and derives course progress percentages.

The cached percentage on an enrollment is a convenience copy: it is
refreshed whenever progress is read or a lesson is completed, and a
failed refresh never fails the caller.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Progress tracking use cases
"""

import logging
from typing import Iterable
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from coursehub.application.services.base_service import BaseService
from coursehub.application.services.serializers import lesson_progress_to_dict
from coursehub.boundary.db.base import utcnow
from coursehub.boundary.db.CRUD import (
    enrollment_crud,
    lesson_crud,
    lesson_progress_crud,
)
from coursehub.boundary.db.models import EnrollmentModel
from coursehub.core.exceptions import (
    CourseHubError,
    CourseNotFoundError,
    LessonNotFoundError,
    NotEnrolledError,
    OperationTimeoutError,
)
from coursehub.core.identity import Actor
from coursehub.core.progress import compute_progress

logger = logging.getLogger(__name__)


class ProgressService(BaseService):
    """Progress tracking orchestrator."""

    async def calculate_progress(self, user_id: str, course_id: UUID) -> int:
        """
        Compute the completion percentage of a user in a course.

        Only completed progress rows of lessons that belong to the course
        are counted. A course without lessons yields 0.

        Args:
            user_id: Opaque user id
            course_id: Course UUID

        Returns:
            int: Percentage in [0, 100], rounded half up
        """
        total = await lesson_crud.count_by_course(self.db, course_id)
        if total == 0:
            return 0
        completed = await lesson_progress_crud.count_completed_for_course(
            self.db, user_id, course_id
        )
        return compute_progress(completed, total)

    async def store_cached_progress(
        self,
        updates: Iterable[tuple[EnrollmentModel, int]],
    ) -> None:
        """
        Best-effort write-back of recomputed percentages.

        Unchanged values are skipped. Errors are logged and swallowed
        after rolling back, so callers must not rely on the session state
        of previously loaded objects afterwards.

        Args:
            updates: Pairs of (enrollment, freshly computed progress)
        """
        changed = [
            (enrollment, progress)
            for enrollment, progress in updates
            if enrollment.progress != progress
            or (progress >= 100 and enrollment.completed_at is None)
        ]
        if not changed:
            return
        try:
            now = utcnow()
            for enrollment, progress in changed:
                await enrollment_crud.set_progress(self.db, enrollment, progress, now)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.warning(
                "Failed to refresh cached progress",
                extra={"error": str(e), "enrollments": len(changed)},
            )

    async def refresh_progress(self, enrollment: EnrollmentModel) -> None:
        """Recompute and store the cached percentage of one enrollment, best effort."""
        enrollment_id = str(enrollment.id)
        try:
            progress = await self.calculate_progress(enrollment.user_id, enrollment.course_id)
        except Exception as e:
            await self.db.rollback()
            logger.warning(
                "Failed to recompute course progress",
                extra={"error": str(e), "enrollment_id": enrollment_id},
            )
            return
        await self.store_cached_progress([(enrollment, progress)])

    async def mark_lesson_complete(
        self,
        actor: Actor,
        lesson_id: UUID,
        timeout: float | None = None,
    ) -> None:
        """
        Record completion of a lesson by an enrolled user.

        The completion row is committed first; the enrollment percentage is
        then refreshed in a separate best-effort transaction. Repeating the
        call keeps a single completion row.

        Args:
            actor: Acting user
            lesson_id: Completed lesson UUID
            timeout: Deadline override in seconds

        Raises:
            LessonNotFoundError: If the lesson does not exist
            CourseNotFoundError: If the lesson's section or course cannot be resolved
            NotEnrolledError: If the user is not enrolled in the course
            OperationTimeoutError: If the deadline expires
        """
        try:
            async with self._deadline("mark_lesson_complete", timeout):
                lesson = await lesson_crud.get_by_id(self.db, lesson_id)
                if lesson is None:
                    raise LessonNotFoundError(str(lesson_id))

                course_id = await lesson_crud.get_course_id(self.db, lesson_id)
                if course_id is None:
                    raise CourseNotFoundError(str(lesson.section_id))

                enrollment = await enrollment_crud.get_by_user_and_course(
                    self.db, actor.user_id, course_id
                )
                if enrollment is None:
                    raise NotEnrolledError(actor.user_id, str(course_id))

                if not await self._upsert_completion(actor.user_id, lesson_id):
                    # The rollback in the retry path expired loaded objects.
                    enrollment = await enrollment_crud.get_by_user_and_course(
                        self.db, actor.user_id, course_id
                    )

                logger.info(
                    "Lesson marked complete",
                    extra={
                        "user_id": actor.user_id,
                        "lesson_id": str(lesson_id),
                        "course_id": str(course_id),
                    },
                )

                if enrollment is not None:
                    await self.refresh_progress(enrollment)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            logger.error(
                "Failed to mark lesson complete",
                extra={"error": str(e), "user_id": actor.user_id, "lesson_id": str(lesson_id)},
            )
            raise

    async def _upsert_completion(self, user_id: str, lesson_id: UUID) -> bool:
        """Commit the completion row; returns False when the retry path was taken."""
        try:
            await lesson_progress_crud.upsert_completed(self.db, user_id, lesson_id, utcnow())
            await self.db.commit()
            return True
        except IntegrityError:
            # A concurrent request inserted the row first; update it instead.
            await self.db.rollback()
            await lesson_progress_crud.upsert_completed(self.db, user_id, lesson_id, utcnow())
            await self.db.commit()
            return False

    async def get_course_progress(
        self,
        actor: Actor,
        course_id: UUID,
        timeout: float | None = None,
    ) -> int:
        """
        Get the completion percentage of the actor in a course.

        The computed value is also written back to the enrollment.

        Args:
            actor: Acting user
            course_id: Course UUID
            timeout: Deadline override in seconds

        Returns:
            int: Percentage in [0, 100]

        Raises:
            NotEnrolledError: If the actor is not enrolled in the course
        """
        try:
            async with self._deadline("get_course_progress", timeout):
                enrollment = await enrollment_crud.get_by_user_and_course(
                    self.db, actor.user_id, course_id
                )
                if enrollment is None:
                    raise NotEnrolledError(actor.user_id, str(course_id))

                progress = await self.calculate_progress(actor.user_id, course_id)
                await self.store_cached_progress([(enrollment, progress)])
                return progress
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            logger.error(
                "Failed to get course progress",
                extra={"error": str(e), "user_id": actor.user_id, "course_id": str(course_id)},
            )
            raise

    async def get_lesson_progress(
        self,
        user_id: str,
        lesson_id: UUID,
        timeout: float | None = None,
    ) -> dict | None:
        """
        Get the progress row of a user for a lesson.

        Args:
            user_id: Opaque user id
            lesson_id: Lesson UUID
            timeout: Deadline override in seconds

        Returns:
            dict | None: Progress data, or None when nothing was recorded
        """
        async with self._deadline("get_lesson_progress", timeout):
            progress = await lesson_progress_crud.get_by_user_and_lesson(
                self.db, user_id, lesson_id
            )
        return lesson_progress_to_dict(progress) if progress else None
