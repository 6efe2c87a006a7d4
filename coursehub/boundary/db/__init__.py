"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - CourseModel, SectionModel, LessonModel: Course content entities
  - EnrollmentModel, LessonProgressModel: Learner state entities
  - CourseLevel, CourseStatus: Enum types for course classification
  - course_crud, section_crud, lesson_crud, enrollment_crud, lesson_progress_crud:
    CRUD operation singletons

Dependencies: sqlalchemy, coursehub.configs
System role: Database adapter providing persistent storage for courses,
curriculum, enrollments, and lesson progress.
"""

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from coursehub.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from coursehub.boundary.db.models import (
    CourseLevel,
    CourseModel,
    CourseStatus,
    EnrollmentModel,
    LessonModel,
    LessonProgressModel,
    SectionModel,
)
from coursehub.boundary.db.CRUD import (
    BaseCRUD,
    course_crud,
    enrollment_crud,
    lesson_crud,
    lesson_progress_crud,
    section_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "CourseLevel",
    "CourseStatus",
    "SectionModel",
    "LessonModel",
    "EnrollmentModel",
    "LessonProgressModel",
    # CRUD
    "BaseCRUD",
    "course_crud",
    "section_crud",
    "lesson_crud",
    "enrollment_crud",
    "lesson_progress_crud",
]
