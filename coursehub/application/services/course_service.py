"""
Course service orchestrator.

Coordinates the course catalog: creation with slug generation, public
detail reads with access gating, catalog listing, updates, and cascading
deletes.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Course use case orchestration
"""

import logging
import math
from enum import Enum
from typing import Any
from uuid import UUID

from coursehub.application.services.base_service import BaseService
from coursehub.application.services.progress_service import ProgressService
from coursehub.application.services.serializers import course_to_dict, curriculum_to_dicts
from coursehub.boundary.db.CRUD import (
    course_crud,
    enrollment_crud,
    lesson_crud,
    lesson_progress_crud,
    section_crud,
)
from coursehub.boundary.db.models import CourseLevel, CourseModel, CourseStatus
from coursehub.core.access_gate import filter_curriculum
from coursehub.core.exceptions import (
    CourseHubError,
    CourseNotFoundError,
    InvalidCourseDataError,
    OperationTimeoutError,
)
from coursehub.core.identity import Actor, require_course_manager
from coursehub.core.progress import compute_progress
from coursehub.core.slug import slugify

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def normalize_pagination(page: int, limit: int) -> tuple[int, int]:
    """Clamp page to >= 1 and reset limits outside 1..100 to the default."""
    if page < 1:
        page = 1
    if limit < 1 or limit > MAX_PAGE_SIZE:
        limit = DEFAULT_PAGE_SIZE
    return page, limit


def parse_level(value: str | None, default: CourseLevel | None = None) -> CourseLevel | None:
    """
    Parse a course level; empty input yields the default.

    Raises:
        InvalidCourseDataError: If the value is not a known level
    """
    if not value:
        return default
    try:
        return CourseLevel(value)
    except ValueError:
        raise InvalidCourseDataError(f"Invalid course level: {value}", field="level") from None


def parse_status(value: str | None, default: CourseStatus | None = None) -> CourseStatus | None:
    """
    Parse a course status; empty input yields the default.

    Raises:
        InvalidCourseDataError: If the value is not a known status
    """
    if not value:
        return default
    try:
        return CourseStatus(value)
    except ValueError:
        raise InvalidCourseDataError(f"Invalid course status: {value}", field="status") from None


def _strict_enum(enum_cls: type[Enum], value: Any, field: str) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidCourseDataError(f"Invalid course {field}: {value}", field=field) from None


class CourseService(BaseService):
    """Course catalog orchestrator."""

    async def _unique_slug(self, title: str, exclude_id: UUID | None = None) -> str:
        base = slugify(title)
        slug = base
        suffix = 1
        while await course_crud.slug_exists(self.db, slug, exclude_id=exclude_id):
            suffix += 1
            slug = f"{base}-{suffix}"
        return slug

    async def create_course(
        self,
        actor: Actor,
        title: str,
        description: str = "",
        thumbnail: str = "",
        price: float = 0.0,
        is_free: bool = False,
        level: str | None = None,
        status: str | None = None,
        timeout: float | None = None,
    ) -> dict:
        """
        Create a new course owned by the actor.

        Empty level/status fall back to beginner/draft. The slug is derived
        from the title and suffixed with -2, -3, ... when taken.

        Args:
            actor: Acting user, becomes the instructor
            title: Course title
            description: Course description
            thumbnail: Thumbnail URL
            price: Listed price
            is_free: Whether the course is free
            level: beginner, intermediate or advanced
            status: draft or published
            timeout: Deadline override in seconds

        Returns:
            dict: Created course

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            InvalidCourseDataError: If level or status is unknown
        """
        require_course_manager(actor)
        course_level = parse_level(level, CourseLevel.BEGINNER)
        course_status = parse_status(status, CourseStatus.DRAFT)

        try:
            async with self._deadline("create_course", timeout):
                slug = await self._unique_slug(title)
                course = await course_crud.create(
                    self.db,
                    title=title,
                    slug=slug,
                    description=description,
                    thumbnail=thumbnail,
                    price=price,
                    is_free=is_free,
                    level=course_level,
                    status=course_status,
                    instructor_id=actor.user_id,
                )
                await self.db.commit()
                logger.info(
                    "Course created",
                    extra={"course_id": str(course.id), "slug": slug, "instructor_id": actor.user_id},
                )
                return course_to_dict(course, sections=[])
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_title": title},
            )
            raise

    async def get_course(
        self,
        slug: str,
        actor: Actor | None = None,
        timeout: float | None = None,
    ) -> dict:
        """
        Get a course by slug as seen by a viewer.

        For an enrolled viewer the course is flagged is_enrolled, lessons
        carry is_completed, and the recomputed progress is written back to
        the enrollment best effort. The access gate is applied last, so
        anonymous and non-enrolled viewers of paid courses only see
        preview lessons.

        Args:
            slug: Course slug
            actor: Viewer, None for anonymous requests
            timeout: Deadline override in seconds

        Returns:
            dict: Course with gated sections

        Raises:
            CourseNotFoundError: If no course has the slug
        """
        try:
            async with self._deadline("get_course", timeout):
                course = await course_crud.get_with_curriculum(self.db, slug=slug)
                if course is None:
                    raise CourseNotFoundError(slug)

                enrollment = None
                completed_ids: set[UUID] = set()
                if actor is not None:
                    enrollment = await enrollment_crud.get_by_user_and_course(
                        self.db, actor.user_id, course.id
                    )
                    if enrollment is not None:
                        completed_ids = await lesson_progress_crud.completed_lesson_ids(
                            self.db, actor.user_id, course.id
                        )

                result = self._course_detail(
                    course,
                    is_enrolled=enrollment is not None,
                    completed_ids=completed_ids,
                )

                if enrollment is not None:
                    progress = compute_progress(len(completed_ids), result["total_lessons"])
                    progress_service = ProgressService(self.db, self.default_timeout)
                    await progress_service.store_cached_progress([(enrollment, progress)])
                return result
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            logger.error("Failed to get course", extra={"error": str(e), "slug": slug})
            raise

    def _course_detail(
        self,
        course: CourseModel,
        *,
        is_enrolled: bool,
        completed_ids: set[UUID],
        gated: bool = True,
    ) -> dict:
        # Totals always describe the full curriculum, gated or not.
        sections = curriculum_to_dicts(course.sections, completed_ids)
        lessons = [lesson for section in sections for lesson in section["lessons"]]
        if gated:
            sections = filter_curriculum(sections, is_enrolled=is_enrolled, is_free=course.is_free)
        return course_to_dict(
            course,
            total_lessons=len(lessons),
            total_duration=sum(lesson["video_duration"] for lesson in lessons),
            is_enrolled=is_enrolled,
            sections=sections,
        )

    async def get_course_by_id(
        self,
        actor: Actor,
        course_id: UUID,
        timeout: float | None = None,
    ) -> dict:
        """
        Get a course with its full, ungated curriculum for management.

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            CourseNotFoundError: If the course does not exist
        """
        require_course_manager(actor)
        async with self._deadline("get_course_by_id", timeout):
            course = await course_crud.get_with_curriculum(self.db, id=course_id)
        if course is None:
            raise CourseNotFoundError(str(course_id))
        return self._course_detail(course, is_enrolled=False, completed_ids=set(), gated=False)

    async def list_courses(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        level: str | None = None,
        is_free: bool | None = None,
        instructor: str | None = None,
        search: str | None = None,
        include_drafts: bool = False,
        timeout: float | None = None,
    ) -> dict:
        """
        List courses newest first with filters and pagination.

        Args:
            page: 1-based page number (values below 1 become 1)
            limit: Page size (values outside 1..100 become 10)
            level: Level filter
            is_free: Free/paid filter
            instructor: Instructor id filter
            search: Case-insensitive substring of title or description
            include_drafts: Include draft courses (management listing)
            timeout: Deadline override in seconds

        Returns:
            dict: {"courses", "total", "page", "total_pages"}

        Raises:
            InvalidCourseDataError: If the level filter is unknown
        """
        page, limit = normalize_pagination(page, limit)
        level_filter = parse_level(level)

        try:
            async with self._deadline("list_courses", timeout):
                courses, total = await course_crud.list_courses(
                    self.db,
                    published_only=not include_drafts,
                    level=level_filter,
                    is_free=is_free,
                    instructor_id=instructor,
                    search=search,
                    limit=limit,
                    offset=(page - 1) * limit,
                )
                totals = await course_crud.get_lesson_totals(self.db, [c.id for c in courses])
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            logger.error(
                "Failed to list courses",
                extra={"error": str(e), "page": page, "limit": limit},
            )
            raise

        return {
            "courses": [
                course_to_dict(
                    c,
                    total_lessons=totals.get(c.id, (0, 0))[0],
                    total_duration=totals.get(c.id, (0, 0))[1],
                )
                for c in courses
            ],
            "total": total,
            "page": page,
            "total_pages": math.ceil(total / limit),
        }

    async def list_all_courses(self, actor: Actor, **params: Any) -> dict:
        """Management listing: like list_courses but includes drafts."""
        require_course_manager(actor)
        return await self.list_courses(include_drafts=True, **params)

    async def update_course(
        self,
        actor: Actor,
        course_id: UUID,
        fields: dict[str, Any],
        timeout: float | None = None,
    ) -> dict:
        """
        Partially update a course.

        Only keys present in fields are touched; no defaults are applied.
        A changed title regenerates the slug.

        Args:
            actor: Acting user
            course_id: Course UUID
            fields: Subset of title, description, thumbnail, price, is_free, level, status
            timeout: Deadline override in seconds

        Returns:
            dict: Updated course

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            InvalidCourseDataError: If level or status is unknown
            CourseNotFoundError: If the course does not exist
        """
        require_course_manager(actor)
        changes = dict(fields)
        # No defaults here: a provided empty value is rejected like any unknown one.
        if "level" in changes:
            changes["level"] = _strict_enum(CourseLevel, changes["level"], "level")
        if "status" in changes:
            changes["status"] = _strict_enum(CourseStatus, changes["status"], "status")

        try:
            async with self._deadline("update_course", timeout):
                course = await course_crud.get_by_id(self.db, course_id)
                if course is None:
                    raise CourseNotFoundError(str(course_id))

                title = changes.get("title")
                if title and title != course.title:
                    changes["slug"] = await self._unique_slug(title, exclude_id=course_id)

                course = await course_crud.update(self.db, course, **changes)
                await self.db.commit()
                logger.info(
                    "Course updated",
                    extra={"course_id": str(course_id), "fields": sorted(changes)},
                )
                totals = await course_crud.get_lesson_totals(self.db, [course.id])
                total_lessons, total_duration = totals.get(course.id, (0, 0))
                return course_to_dict(
                    course, total_lessons=total_lessons, total_duration=total_duration
                )
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

    async def delete_course(
        self,
        actor: Actor,
        course_id: UUID,
        timeout: float | None = None,
    ) -> None:
        """
        Delete a course with its sections, lessons, progress rows and enrollments.

        Raises:
            UnauthorizedError: If the actor cannot manage courses
            CourseNotFoundError: If the course does not exist
        """
        require_course_manager(actor)
        try:
            async with self._deadline("delete_course", timeout):
                if not await course_crud.exists(self.db, course_id):
                    raise CourseNotFoundError(str(course_id))

                section_ids = await section_crud.get_ids_by_course(self.db, course_id)
                await lesson_progress_crud.delete_by_sections(self.db, section_ids)
                await lesson_crud.delete_by_sections(self.db, section_ids)
                await section_crud.delete_by_course(self.db, course_id)
                enrollments = await enrollment_crud.delete_by_course(self.db, course_id)
                await course_crud.delete_by_id(self.db, course_id)
                await self.db.commit()
                logger.info(
                    "Course deleted",
                    extra={
                        "course_id": str(course_id),
                        "sections_deleted": len(section_ids),
                        "enrollments_deleted": enrollments,
                    },
                )
        except OperationTimeoutError:
            await self.db.rollback()
            raise
        except CourseHubError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise
