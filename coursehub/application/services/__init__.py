"""Service orchestrators."""

from .course_service import CourseService
from .curriculum_service import CurriculumService
from .enrollment_service import EnrollmentService
from .progress_service import ProgressService

__all__ = [
    "CourseService",
    "CurriculumService",
    "EnrollmentService",
    "ProgressService",
]
