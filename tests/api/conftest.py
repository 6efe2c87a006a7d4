"""
Shared fixtures for HTTP endpoint tests.

Services are replaced with AsyncMocks through dependency_overrides, so
no database is needed.
"""

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from coursehub.api.main import create_app

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    return {"X-User-ID": "admin-1", "X-User-Role": "admin"}


@pytest.fixture
def student_headers() -> dict:
    return {"X-User-ID": "student-1", "X-User-Role": "student"}


@pytest.fixture
def lesson_data():
    """Factory for lesson dictionaries as returned by the services."""

    def _make(section_id=None, **overrides) -> dict:
        data = {
            "id": uuid.uuid4(),
            "section_id": section_id or uuid.uuid4(),
            "title": "Lesson",
            "description": "",
            "content": "",
            "video_url": "",
            "video_duration": 60,
            "order_index": 0,
            "is_preview": False,
            "is_completed": False,
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def section_data():
    """Factory for section dictionaries as returned by the services."""

    def _make(course_id=None, lessons=(), **overrides) -> dict:
        data = {
            "id": uuid.uuid4(),
            "course_id": course_id or uuid.uuid4(),
            "title": "Section",
            "description": "",
            "order_index": 0,
            "lessons": list(lessons),
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def course_data():
    """Factory for course dictionaries as returned by the services."""

    def _make(**overrides) -> dict:
        data = {
            "id": uuid.uuid4(),
            "title": "Intro to Go",
            "slug": "intro-to-go",
            "description": "",
            "thumbnail": "",
            "price": 0.0,
            "is_free": True,
            "level": "beginner",
            "status": "published",
            "instructor_id": "admin-1",
            "total_lessons": 0,
            "total_duration": 0,
            "is_enrolled": False,
            "sections": None,
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return data

    return _make
