"""
CRUD operations package.

Exports singleton CRUD instances for each model.

Dependencies: coursehub.boundary.db.models
System role: Database access layer
"""

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from coursehub.boundary.db.CRUD.section_crud import SectionCRUD, section_crud
from coursehub.boundary.db.CRUD.lesson_crud import LessonCRUD, lesson_crud
from coursehub.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud
from coursehub.boundary.db.CRUD.lesson_progress_crud import (
    LessonProgressCRUD,
    lesson_progress_crud,
)

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "SectionCRUD",
    "section_crud",
    "LessonCRUD",
    "lesson_crud",
    "EnrollmentCRUD",
    "enrollment_crud",
    "LessonProgressCRUD",
    "lesson_progress_crud",
]
