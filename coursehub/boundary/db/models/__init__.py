"""
Database models package.

Exports:
  - CourseModel, CourseLevel, CourseStatus: Course ORM model and enums
  - SectionModel: Course section ORM model
  - LessonModel: Lesson ORM model
  - EnrollmentModel: Enrollment ORM model
  - LessonProgressModel: Per-lesson progress ORM model

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Database model definitions for domain entities
"""

from coursehub.boundary.db.models.course_model import CourseLevel, CourseModel, CourseStatus
from coursehub.boundary.db.models.section_model import SectionModel
from coursehub.boundary.db.models.lesson_model import LessonModel
from coursehub.boundary.db.models.enrollment_model import EnrollmentModel
from coursehub.boundary.db.models.lesson_progress_model import LessonProgressModel

__all__ = [
    "CourseModel",
    "CourseLevel",
    "CourseStatus",
    "SectionModel",
    "LessonModel",
    "EnrollmentModel",
    "LessonProgressModel",
]
