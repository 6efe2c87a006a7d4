"""
Curriculum service orchestrator.

Manages sections and lessons of a course. Deletes remove children in the
same transaction: a section takes its lessons and their progress rows
with it, a lesson its progress rows.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Curriculum use cases
"""

import logging
from typing import Any
from uuid import UUID

from coursehub.application.services.base_service import BaseService
from coursehub.application.services.serializers import (
    curriculum_to_dicts,
    lesson_to_dict,
    section_to_dict,
)
from coursehub.boundary.db.CRUD import (
    course_crud,
    lesson_crud,
    lesson_progress_crud,
    section_crud,
)
from coursehub.core.exceptions import (
    CourseHubError,
    CourseNotFoundError,
    LessonNotFoundError,
    OperationTimeoutError,
    SectionNotFoundError,
)
from coursehub.core.identity import Actor, require_course_manager

logger = logging.getLogger(__name__)


class CurriculumService(BaseService):
    """Section and lesson orchestrator."""

    async def create_section(
        self,
        actor: Actor,
        course_id: UUID,
        title: str,
        description: str = "",
        order_index: int = 0,
        timeout: float | None = None,
    ) -> dict:
        """
        Add a section to a course.

        Duplicate order indices are allowed.

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            CourseNotFoundError: If the course does not exist
        """
        require_course_manager(actor)
        try:
            async with self._deadline("create_section", timeout):
                if not await course_crud.exists(self.db, course_id):
                    raise CourseNotFoundError(str(course_id))

                section = await section_crud.create(
                    self.db,
                    course_id=course_id,
                    title=title,
                    description=description,
                    order_index=order_index,
                )
                await self.db.commit()
                logger.info(
                    "Section created",
                    extra={"section_id": str(section.id), "course_id": str(course_id)},
                )
                return section_to_dict(section)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create section",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

    async def update_section(
        self,
        actor: Actor,
        section_id: UUID,
        fields: dict[str, Any],
        timeout: float | None = None,
    ) -> dict:
        """
        Partially update a section.

        Args:
            actor: Acting user
            section_id: Section UUID
            fields: Subset of title, description, order_index
            timeout: Deadline override in seconds

        Raises:
            SectionNotFoundError: If the section does not exist
        """
        require_course_manager(actor)
        try:
            async with self._deadline("update_section", timeout):
                section = await section_crud.get_by_id(self.db, section_id)
                if section is None:
                    raise SectionNotFoundError(str(section_id))

                section = await section_crud.update(self.db, section, **fields)
                await self.db.commit()
                logger.info(
                    "Section updated",
                    extra={"section_id": str(section_id), "fields": sorted(fields)},
                )
                return section_to_dict(section)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update section",
                extra={"error": str(e), "section_id": str(section_id)},
            )
            raise

    async def delete_section(
        self,
        actor: Actor,
        section_id: UUID,
        timeout: float | None = None,
    ) -> None:
        """
        Delete a section with its lessons and their progress rows.

        Deleting an unknown section succeeds.
        """
        require_course_manager(actor)
        try:
            async with self._deadline("delete_section", timeout):
                await lesson_progress_crud.delete_by_sections(self.db, [section_id])
                lessons = await lesson_crud.delete_by_sections(self.db, [section_id])
                await section_crud.delete_by_id(self.db, section_id)
                await self.db.commit()
                logger.info(
                    "Section deleted",
                    extra={"section_id": str(section_id), "lessons_deleted": lessons},
                )
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete section",
                extra={"error": str(e), "section_id": str(section_id)},
            )
            raise

    async def create_lesson(
        self,
        actor: Actor,
        section_id: UUID,
        title: str,
        description: str = "",
        content: str = "",
        video_url: str = "",
        video_duration: int = 0,
        order_index: int = 0,
        is_preview: bool = False,
        timeout: float | None = None,
    ) -> dict:
        """
        Add a lesson to a section.

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            SectionNotFoundError: If the section does not exist
        """
        require_course_manager(actor)
        try:
            async with self._deadline("create_lesson", timeout):
                if not await section_crud.exists(self.db, section_id):
                    raise SectionNotFoundError(str(section_id))

                lesson = await lesson_crud.create(
                    self.db,
                    section_id=section_id,
                    title=title,
                    description=description,
                    content=content,
                    video_url=video_url,
                    video_duration=video_duration,
                    order_index=order_index,
                    is_preview=is_preview,
                )
                await self.db.commit()
                logger.info(
                    "Lesson created",
                    extra={"lesson_id": str(lesson.id), "section_id": str(section_id)},
                )
                return lesson_to_dict(lesson)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create lesson",
                extra={"error": str(e), "section_id": str(section_id)},
            )
            raise

    async def update_lesson(
        self,
        actor: Actor,
        lesson_id: UUID,
        fields: dict[str, Any],
        timeout: float | None = None,
    ) -> dict:
        """
        Partially update a lesson.

        Raises:
            LessonNotFoundError: If the lesson does not exist
        """
        require_course_manager(actor)
        try:
            async with self._deadline("update_lesson", timeout):
                lesson = await lesson_crud.get_by_id(self.db, lesson_id)
                if lesson is None:
                    raise LessonNotFoundError(str(lesson_id))

                lesson = await lesson_crud.update(self.db, lesson, **fields)
                await self.db.commit()
                logger.info(
                    "Lesson updated",
                    extra={"lesson_id": str(lesson_id), "fields": sorted(fields)},
                )
                return lesson_to_dict(lesson)
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update lesson",
                extra={"error": str(e), "lesson_id": str(lesson_id)},
            )
            raise

    async def delete_lesson(
        self,
        actor: Actor,
        lesson_id: UUID,
        timeout: float | None = None,
    ) -> None:
        """Delete a lesson and its progress rows. Deleting an unknown lesson succeeds."""
        require_course_manager(actor)
        try:
            async with self._deadline("delete_lesson", timeout):
                await lesson_progress_crud.delete_by_lesson(self.db, lesson_id)
                await lesson_crud.delete_by_id(self.db, lesson_id)
                await self.db.commit()
                logger.info("Lesson deleted", extra={"lesson_id": str(lesson_id)})
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete lesson",
                extra={"error": str(e), "lesson_id": str(lesson_id)},
            )
            raise

    async def get_curriculum(
        self,
        course_id: UUID,
        timeout: float | None = None,
    ) -> list[dict]:
        """
        Get the sections of a course with their lessons.

        Sections and lessons are ordered by order_index, ties by creation time.

        Raises:
            CourseNotFoundError: If the course does not exist
        """
        async with self._deadline("get_curriculum", timeout):
            if not await course_crud.exists(self.db, course_id):
                raise CourseNotFoundError(str(course_id))
            sections = await section_crud.get_by_course_with_lessons(self.db, course_id)
        return curriculum_to_dicts(sections)
