"""
Test suite for ProgressService.

System role: Verification of lesson completion and progress percentages
"""

import uuid
from datetime import timedelta
from unittest.mock import patch

import pytest
from sqlalchemy import delete, func, select

from coursehub.application.services.progress_service import ProgressService
from coursehub.boundary.db.base import utcnow
from coursehub.boundary.db.CRUD import enrollment_crud, lesson_progress_crud
from coursehub.boundary.db.models import LessonProgressModel, SectionModel
from coursehub.core.exceptions import (
    CourseNotFoundError,
    LessonNotFoundError,
    NotEnrolledError,
)


@pytest.fixture
def progress_service(test_async_db) -> ProgressService:
    """Provide ProgressService bound to the test database."""
    return ProgressService(test_async_db)


@pytest.fixture
async def enrolled_course(test_async_db, make_course, make_section, make_lesson, student):
    """A course with four lessons in two sections and the student enrolled."""
    course = await make_course()
    first = await make_section(course)
    second = await make_section(course, order_index=1)
    lessons = [
        await make_lesson(first),
        await make_lesson(first, order_index=1),
        await make_lesson(second),
        await make_lesson(second, order_index=1),
    ]
    enrollment = await enrollment_crud.create(
        test_async_db, user_id=student.user_id, course_id=course.id
    )
    await test_async_db.commit()
    return course, lessons, enrollment


async def _progress_rows(db) -> int:
    return (await db.execute(select(func.count()).select_from(LessonProgressModel))).scalar_one()


class TestMarkLessonComplete:
    """Test suite for ProgressService.mark_lesson_complete()."""

    @pytest.mark.asyncio
    async def test_completion_updates_cached_progress(
        self, progress_service, test_async_db, enrolled_course, student
    ) -> None:
        # Arrange
        course, lessons, enrollment = enrolled_course

        # Act
        await progress_service.mark_lesson_complete(student, lessons[0].id)

        # Assert
        stored = await enrollment_crud.get_by_id(test_async_db, enrollment.id)
        assert stored.progress == 25
        assert stored.completed_at is None

    @pytest.mark.asyncio
    async def test_completion_is_idempotent(
        self, progress_service, test_async_db, enrolled_course, student
    ) -> None:
        """Test completing the same lesson twice keeps one row and the same percentage."""
        course, lessons, _ = enrolled_course

        await progress_service.mark_lesson_complete(student, lessons[0].id)
        first = await progress_service.get_course_progress(student, course.id)
        await progress_service.mark_lesson_complete(student, lessons[0].id)
        second = await progress_service.get_course_progress(student, course.id)

        assert first == second == 25
        assert await _progress_rows(test_async_db) == 1

    @pytest.mark.asyncio
    async def test_repeat_completion_refreshes_timestamps(
        self, progress_service, test_async_db, enrolled_course, student
    ) -> None:
        _, lessons, _ = enrolled_course
        earlier = utcnow()
        later = earlier + timedelta(hours=1)
        clock = "coursehub.application.services.progress_service.utcnow"

        with patch(clock, return_value=earlier):
            await progress_service.mark_lesson_complete(student, lessons[0].id)
        first = await progress_service.get_lesson_progress(student.user_id, lessons[0].id)
        first_completed, first_watched = first["completed_at"], first["last_watched_at"]

        with patch(clock, return_value=later):
            await progress_service.mark_lesson_complete(student, lessons[0].id)
        second = await progress_service.get_lesson_progress(student.user_id, lessons[0].id)

        assert second["completed"] is True
        assert second["completed_at"].replace(tzinfo=None) > first_completed.replace(tzinfo=None)
        assert second["last_watched_at"].replace(tzinfo=None) > first_watched.replace(tzinfo=None)
        assert await _progress_rows(test_async_db) == 1

    @pytest.mark.asyncio
    async def test_finishing_every_lesson_completes_the_enrollment(
        self, progress_service, test_async_db, enrolled_course, student
    ) -> None:
        course, lessons, enrollment = enrolled_course

        for lesson in lessons:
            await progress_service.mark_lesson_complete(student, lesson.id)

        stored = await enrollment_crud.get_by_id(test_async_db, enrollment.id)
        assert stored.progress == 100
        assert stored.completed_at is not None

    @pytest.mark.asyncio
    async def test_not_enrolled_writes_nothing(
        self, progress_service, test_async_db, make_course, make_section, make_lesson, student
    ) -> None:
        lesson = await make_lesson(await make_section(await make_course()))

        with pytest.raises(NotEnrolledError):
            await progress_service.mark_lesson_complete(student, lesson.id)

        assert await _progress_rows(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_unknown_lesson(self, progress_service, student) -> None:
        with pytest.raises(LessonNotFoundError):
            await progress_service.mark_lesson_complete(student, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_lesson_with_missing_section(
        self, progress_service, test_async_db, make_course, make_section, make_lesson, student
    ) -> None:
        """Test a lesson whose section is gone resolves to a missing course."""
        # Arrange
        section = await make_section(await make_course())
        lesson = await make_lesson(section)
        await test_async_db.execute(delete(SectionModel).where(SectionModel.id == section.id))
        await test_async_db.commit()

        # Act / Assert
        with pytest.raises(CourseNotFoundError):
            await progress_service.mark_lesson_complete(student, lesson.id)

    @pytest.mark.asyncio
    async def test_failed_cache_refresh_keeps_the_completion(
        self, progress_service, test_async_db, enrolled_course, student
    ) -> None:
        """Test the completion commit survives a failing progress write-back."""
        course, lessons, _ = enrolled_course

        with patch.object(enrollment_crud, "set_progress", side_effect=RuntimeError("db down")):
            await progress_service.mark_lesson_complete(student, lessons[0].id)

        row = await lesson_progress_crud.get_by_user_and_lesson(
            test_async_db, student.user_id, lessons[0].id
        )
        assert row is not None
        assert row.completed is True


class TestCourseProgress:
    """Test suite for progress reads."""

    @pytest.mark.asyncio
    async def test_not_enrolled(self, progress_service, make_course, student) -> None:
        course = await make_course()

        with pytest.raises(NotEnrolledError):
            await progress_service.get_course_progress(student, course.id)

    @pytest.mark.asyncio
    async def test_course_without_lessons_is_zero(
        self, progress_service, test_async_db, make_course, student
    ) -> None:
        course = await make_course()
        await enrollment_crud.create(test_async_db, user_id=student.user_id, course_id=course.id)
        await test_async_db.commit()

        assert await progress_service.get_course_progress(student, course.id) == 0

    @pytest.mark.asyncio
    async def test_lesson_progress_record(
        self, progress_service, enrolled_course, student
    ) -> None:
        _, lessons, _ = enrolled_course

        assert await progress_service.get_lesson_progress(student.user_id, lessons[1].id) is None
        await progress_service.mark_lesson_complete(student, lessons[1].id)
        record = await progress_service.get_lesson_progress(student.user_id, lessons[1].id)

        assert record["completed"] is True
        assert record["lesson_id"] == lessons[1].id
        assert record["completed_at"] is not None
