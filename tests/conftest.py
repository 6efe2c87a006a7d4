"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, actors, and factories that seed
courses, sections, and lessons.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from coursehub.core.identity import Actor, Role


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool

    from coursehub.boundary.db.base import Base
    import coursehub.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def admin() -> Actor:
    """Admin actor allowed to manage courses."""
    return Actor(user_id="admin-1", role=Role.ADMIN)


@pytest.fixture
def instructor() -> Actor:
    """Instructor actor allowed to manage courses."""
    return Actor(user_id="instructor-1", role=Role.INSTRUCTOR)


@pytest.fixture
def student() -> Actor:
    """Student actor."""
    return Actor(user_id="student-1", role=Role.STUDENT)


@pytest.fixture
def make_course(test_async_db):
    """
    Factory fixture that persists a course.

    Defaults to a free, published course. Each call gets a unique slug and
    a creation time one minute after the previous one so ordering is stable.
    """
    from coursehub.boundary.db.CRUD import course_crud
    from coursehub.boundary.db.models import CourseLevel, CourseStatus

    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        fields = {
            "title": f"Course {counter['n']}",
            "slug": f"course-{uuid.uuid4().hex[:8]}",
            "description": "",
            "thumbnail": "",
            "price": 0.0,
            "is_free": True,
            "level": CourseLevel.BEGINNER,
            "status": CourseStatus.PUBLISHED,
            "instructor_id": "instructor-1",
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        course = await course_crud.create(test_async_db, **fields)
        await test_async_db.commit()
        return course

    return _make


@pytest.fixture
def make_section(test_async_db):
    """Factory fixture that persists a section in a course."""
    from coursehub.boundary.db.CRUD import section_crud

    async def _make(course, **overrides):
        fields = {"course_id": course.id, "title": "Section", "order_index": 0}
        fields.update(overrides)
        section = await section_crud.create(test_async_db, **fields)
        await test_async_db.commit()
        return section

    return _make


@pytest.fixture
def make_lesson(test_async_db):
    """Factory fixture that persists a lesson in a section."""
    from coursehub.boundary.db.CRUD import lesson_crud

    async def _make(section, **overrides):
        fields = {
            "section_id": section.id,
            "title": "Lesson",
            "video_duration": 60,
            "order_index": 0,
            "is_preview": False,
        }
        fields.update(overrides)
        lesson = await lesson_crud.create(test_async_db, **fields)
        await test_async_db.commit()
        return lesson

    return _make
