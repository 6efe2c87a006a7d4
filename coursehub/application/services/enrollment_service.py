"""
Enrollment service orchestrator.

Enrollment is a one-way transition per (user, course): once enrolled, a
user stays enrolled. Only published free courses accept enrollments;
paid enrollment is always rejected.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Enrollment use cases
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from coursehub.application.services.base_service import BaseService
from coursehub.application.services.progress_service import ProgressService
from coursehub.application.services.serializers import enrollment_to_dict
from coursehub.boundary.db.CRUD import course_crud, enrollment_crud
from coursehub.boundary.db.models import CourseStatus
from coursehub.core.exceptions import (
    AlreadyEnrolledError,
    CourseHubError,
    CourseNotFoundError,
    CourseNotPublishedError,
    OperationTimeoutError,
    PaymentRequiredError,
)
from coursehub.core.identity import Actor

logger = logging.getLogger(__name__)


class EnrollmentService(BaseService):
    """Enrollment orchestrator."""

    async def enroll(
        self,
        actor: Actor,
        course_id: UUID,
        timeout: float | None = None,
    ) -> dict:
        """
        Enroll the actor in a course.

        Checks run in order: existing enrollment, course existence,
        published status, price. The unique (user_id, course_id)
        constraint backs the first check against concurrent requests.

        Args:
            actor: Acting user
            course_id: Course UUID
            timeout: Deadline override in seconds

        Returns:
            dict: Created enrollment with progress 0

        Raises:
            AlreadyEnrolledError: If the actor is already enrolled
            CourseNotFoundError: If the course does not exist
            CourseNotPublishedError: If the course is still a draft
            PaymentRequiredError: If the course is not free
            OperationTimeoutError: If the deadline expires
        """
        try:
            async with self._deadline("enroll", timeout):
                existing = await enrollment_crud.get_by_user_and_course(
                    self.db, actor.user_id, course_id
                )
                if existing is not None:
                    raise AlreadyEnrolledError(actor.user_id, str(course_id))

                course = await course_crud.get_by_id(self.db, course_id)
                if course is None:
                    raise CourseNotFoundError(str(course_id))
                if course.status != CourseStatus.PUBLISHED:
                    raise CourseNotPublishedError(str(course_id))
                if not course.is_free:
                    raise PaymentRequiredError(str(course_id))

                try:
                    enrollment = await enrollment_crud.create(
                        self.db,
                        user_id=actor.user_id,
                        course_id=course_id,
                        progress=0,
                    )
                    await self.db.commit()
                except IntegrityError as e:
                    await self.db.rollback()
                    raise AlreadyEnrolledError(actor.user_id, str(course_id)) from e

                logger.info(
                    "User enrolled",
                    extra={"user_id": actor.user_id, "course_id": str(course_id)},
                )
                return enrollment_to_dict(enrollment)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to enroll",
                extra={"error": str(e), "user_id": actor.user_id, "course_id": str(course_id)},
            )
            raise

    async def get_enrollment(
        self,
        user_id: str,
        course_id: UUID,
        timeout: float | None = None,
    ) -> dict | None:
        """
        Get the enrollment of a user in a course.

        Returns:
            dict | None: Enrollment data, None when not enrolled
        """
        async with self._deadline("get_enrollment", timeout):
            enrollment = await enrollment_crud.get_by_user_and_course(self.db, user_id, course_id)
        return enrollment_to_dict(enrollment) if enrollment else None

    async def get_my_enrollments(
        self,
        actor: Actor,
        timeout: float | None = None,
    ) -> list[dict]:
        """
        List the actor's enrollments, newest first, with fresh progress.

        Each entry carries a course summary. Recomputed percentages are
        written back to the enrollments best effort.

        Args:
            actor: Acting user
            timeout: Deadline override in seconds

        Returns:
            list[dict]: Enrollment dicts with "course" summaries
        """
        try:
            async with self._deadline("get_my_enrollments", timeout):
                enrollments = await enrollment_crud.get_by_user(self.db, actor.user_id)
                progress_service = ProgressService(self.db, self.default_timeout)

                results = []
                updates = []
                for enrollment in enrollments:
                    progress = await progress_service.calculate_progress(
                        actor.user_id, enrollment.course_id
                    )
                    results.append(enrollment_to_dict(enrollment, progress, enrollment.course))
                    updates.append((enrollment, progress))

                await progress_service.store_cached_progress(updates)
                return results
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            logger.error(
                "Failed to list enrollments",
                extra={"error": str(e), "user_id": actor.user_id},
            )
            raise
