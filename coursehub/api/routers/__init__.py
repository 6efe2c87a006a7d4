"""API routers."""

from .courses import admin_courses_router, curriculum_router
from .courses import router as courses_router
from .health import router as health_router
from .student import router as student_router

__all__ = [
    "admin_courses_router",
    "courses_router",
    "curriculum_router",
    "health_router",
    "student_router",
]
