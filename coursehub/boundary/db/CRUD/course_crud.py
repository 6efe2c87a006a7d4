"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with catalog queries, curriculum eager loading, and lesson aggregates.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.boundary.db.models.course_model import CourseLevel, CourseModel, CourseStatus
from coursehub.boundary.db.models.lesson_model import LessonModel
from coursehub.boundary.db.models.section_model import SectionModel
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with slug lookups, filtered catalog listing, and
    eager loading of sections and their lessons.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> CourseModel | None:
        """
        Retrieve course by slug.

        Args:
            session: Async database session
            slug: Course slug

        Returns:
            CourseModel if found, None otherwise
        """
        return await self.get_one_where(session, CourseModel.slug == slug)

    async def get_with_curriculum(
        self,
        session: AsyncSession,
        id: UUID | None = None,
        slug: str | None = None,
    ) -> CourseModel | None:
        """
        Retrieve course with eagerly loaded sections and lessons.

        Exactly one of id or slug should be given.

        Args:
            session: Async database session
            id: Course UUID
            slug: Course slug

        Returns:
            CourseModel with sections and lessons loaded, None if not found
        """
        stmt = select(CourseModel).options(
            selectinload(CourseModel.sections).selectinload(SectionModel.lessons)
        )
        if id is not None:
            stmt = stmt.where(CourseModel.id == id)
        else:
            stmt = stmt.where(CourseModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_exists(
        self,
        session: AsyncSession,
        slug: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether a slug is taken by another course.

        Args:
            session: Async database session
            slug: Candidate slug
            exclude_id: Course allowed to hold the slug (the one being renamed)

        Returns:
            True if another course uses the slug
        """
        stmt = select(CourseModel.id).where(CourseModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(CourseModel.id != exclude_id)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_courses(
        self,
        session: AsyncSession,
        *,
        published_only: bool,
        level: CourseLevel | None = None,
        is_free: bool | None = None,
        instructor_id: str | None = None,
        search: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[Sequence[CourseModel], int]:
        """
        Retrieve a filtered page of courses, newest first.

        Args:
            session: Async database session
            published_only: Exclude drafts when True
            level: Only courses of this level
            is_free: Only free (True) or paid (False) courses
            instructor_id: Only courses by this instructor
            search: Case-insensitive substring of title or description
            limit: Page size
            offset: Number of courses to skip

        Returns:
            Tuple of (courses on the page, total matching courses)
        """
        stmt = select(CourseModel)
        if published_only:
            stmt = stmt.where(CourseModel.status == CourseStatus.PUBLISHED)
        if level is not None:
            stmt = stmt.where(CourseModel.level == level)
        if is_free is not None:
            stmt = stmt.where(CourseModel.is_free == is_free)
        if instructor_id:
            stmt = stmt.where(CourseModel.instructor_id == instructor_id)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(CourseModel.title.ilike(pattern), CourseModel.description.ilike(pattern))
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await session.execute(count_stmt)).scalar_one()

        page_stmt = (
            stmt.order_by(CourseModel.created_at.desc(), CourseModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await session.execute(page_stmt)
        return result.scalars().all(), total

    async def get_lesson_totals(
        self,
        session: AsyncSession,
        course_ids: Sequence[UUID],
    ) -> dict[UUID, tuple[int, int]]:
        """
        Count lessons and sum video durations per course.

        Args:
            session: Async database session
            course_ids: Courses to aggregate

        Returns:
            Mapping course_id -> (total_lessons, total_duration_seconds);
            courses without lessons are absent
        """
        if not course_ids:
            return {}
        stmt = (
            select(
                SectionModel.course_id,
                func.count(LessonModel.id),
                func.coalesce(func.sum(LessonModel.video_duration), 0),
            )
            .join(LessonModel, LessonModel.section_id == SectionModel.id)
            .where(SectionModel.course_id.in_(course_ids))
            .group_by(SectionModel.course_id)
        )
        result = await session.execute(stmt)
        return {row[0]: (int(row[1]), int(row[2])) for row in result.all()}


course_crud = CourseCRUD()
