"""
Test suite for course, curriculum and progress queries.

Runs against an in-memory SQLite database.

System role: Verification of catalog filters, aggregates and ordering
"""

import uuid
from datetime import timedelta

import pytest

from coursehub.boundary.db.CRUD import (
    course_crud,
    enrollment_crud,
    lesson_crud,
    lesson_progress_crud,
    section_crud,
)
from coursehub.boundary.db.base import utcnow
from coursehub.boundary.db.models import CourseLevel, CourseStatus


class TestListCourses:
    """Test suite for CourseCRUD.list_courses()."""

    @pytest.mark.asyncio
    async def test_published_only_newest_first(self, test_async_db, make_course) -> None:
        # Arrange
        older = await make_course(title="Older")
        await make_course(title="Draft", status=CourseStatus.DRAFT)
        newer = await make_course(title="Newer")

        # Act
        courses, total = await course_crud.list_courses(test_async_db, published_only=True)

        # Assert
        assert total == 2
        assert [c.id for c in courses] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_filters_combine(self, test_async_db, make_course) -> None:
        """Test level, price, instructor and search filters narrow the result."""
        # Arrange
        match = await make_course(
            title="Advanced Go Concurrency",
            level=CourseLevel.ADVANCED,
            is_free=False,
            price=49.0,
            instructor_id="alice",
        )
        await make_course(title="Advanced Go Basics", level=CourseLevel.ADVANCED, instructor_id="alice")
        await make_course(title="Concurrency for beginners", instructor_id="bob", is_free=False)

        # Act
        courses, total = await course_crud.list_courses(
            test_async_db,
            published_only=True,
            level=CourseLevel.ADVANCED,
            is_free=False,
            instructor_id="alice",
            search="concurrency",
        )

        # Assert
        assert total == 1
        assert courses[0].id == match.id

    @pytest.mark.asyncio
    async def test_search_matches_description_case_insensitively(
        self, test_async_db, make_course
    ) -> None:
        course = await make_course(title="Untitled", description="Learn SQLAlchemy the async way")

        courses, _ = await course_crud.list_courses(
            test_async_db, published_only=False, search="sqlalchemy"
        )

        assert [c.id for c in courses] == [course.id]

    @pytest.mark.asyncio
    async def test_pagination_reports_full_total(self, test_async_db, make_course) -> None:
        for _ in range(5):
            await make_course()

        courses, total = await course_crud.list_courses(
            test_async_db, published_only=True, limit=2, offset=4
        )

        assert total == 5
        assert len(courses) == 1


class TestCurriculumQueries:
    """Test suite for curriculum loading and aggregates."""

    @pytest.mark.asyncio
    async def test_curriculum_is_ordered_by_order_index(
        self, test_async_db, make_course, make_section, make_lesson
    ) -> None:
        # Arrange
        course = await make_course()
        second = await make_section(course, title="Second", order_index=2)
        first = await make_section(course, title="First", order_index=1)
        await make_lesson(first, title="B", order_index=5)
        await make_lesson(first, title="A", order_index=1)

        # Act
        sections = await section_crud.get_by_course_with_lessons(test_async_db, course.id)

        # Assert
        assert [s.id for s in sections] == [first.id, second.id]
        assert [lesson.title for lesson in sections[0].lessons] == ["A", "B"]
        assert sections[1].lessons == []

    @pytest.mark.asyncio
    async def test_lesson_totals_per_course(
        self, test_async_db, make_course, make_section, make_lesson
    ) -> None:
        # Arrange
        course = await make_course()
        empty = await make_course()
        section = await make_section(course)
        lesson = await make_lesson(section, video_duration=120)
        await make_lesson(section, video_duration=30)

        # Act
        totals = await course_crud.get_lesson_totals(test_async_db, [course.id, empty.id])

        # Assert
        assert totals == {course.id: (2, 150)}
        assert await lesson_crud.count_by_course(test_async_db, course.id) == 2
        assert await lesson_crud.get_course_id(test_async_db, lesson.id) == course.id
        assert await lesson_crud.get_course_id(test_async_db, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_slug_exists_can_exclude_owner(self, test_async_db, make_course) -> None:
        course = await make_course(slug="intro")

        assert await course_crud.slug_exists(test_async_db, "intro")
        assert not await course_crud.slug_exists(test_async_db, "intro", exclude_id=course.id)
        assert (await course_crud.get_by_slug(test_async_db, "intro")).id == course.id


class TestProgressQueries:
    """Test suite for lesson progress and enrollment queries."""

    @pytest.mark.asyncio
    async def test_completed_lessons_are_scoped_to_the_course(
        self, test_async_db, make_course, make_section, make_lesson
    ) -> None:
        # Arrange
        course = await make_course()
        other = await make_course()
        lesson = await make_lesson(await make_section(course))
        foreign = await make_lesson(await make_section(other))
        now = utcnow()
        await lesson_progress_crud.upsert_completed(test_async_db, "u1", lesson.id, now)
        await lesson_progress_crud.upsert_completed(test_async_db, "u1", foreign.id, now)
        await test_async_db.commit()

        # Act
        completed = await lesson_progress_crud.completed_lesson_ids(test_async_db, "u1", course.id)
        count = await lesson_progress_crud.count_completed_for_course(
            test_async_db, "u1", course.id
        )

        # Assert
        assert completed == {lesson.id}
        assert count == 1

    @pytest.mark.asyncio
    async def test_upsert_keeps_a_single_row(
        self, test_async_db, make_course, make_section, make_lesson
    ) -> None:
        lesson = await make_lesson(await make_section(await make_course()))

        first = await lesson_progress_crud.upsert_completed(test_async_db, "u1", lesson.id, utcnow())
        second = await lesson_progress_crud.upsert_completed(test_async_db, "u1", lesson.id, utcnow())

        assert first.id == second.id
        assert second.completed is True

    @pytest.mark.asyncio
    async def test_repeat_completion_refreshes_timestamps(
        self, test_async_db, make_course, make_section, make_lesson
    ) -> None:
        lesson = await make_lesson(await make_section(await make_course()))
        earlier = utcnow()
        later = earlier + timedelta(minutes=5)

        await lesson_progress_crud.upsert_completed(test_async_db, "u1", lesson.id, earlier)
        await test_async_db.commit()
        row = await lesson_progress_crud.upsert_completed(test_async_db, "u1", lesson.id, later)
        await test_async_db.commit()
        await test_async_db.refresh(row)

        assert row.completed_at.replace(tzinfo=None) == later.replace(tzinfo=None)
        assert row.last_watched_at.replace(tzinfo=None) == later.replace(tzinfo=None)

    @pytest.mark.asyncio
    async def test_set_progress_stamps_completion_once(self, test_async_db, make_course) -> None:
        # Arrange
        course = await make_course()
        enrollment = await enrollment_crud.create(test_async_db, user_id="u1", course_id=course.id)
        first_time = utcnow()

        # Act
        await enrollment_crud.set_progress(test_async_db, enrollment, 100, first_time)
        stamped = enrollment.completed_at
        await enrollment_crud.set_progress(test_async_db, enrollment, 100, utcnow())

        # Assert
        assert enrollment.progress == 100
        assert stamped is not None
        assert enrollment.completed_at == stamped
