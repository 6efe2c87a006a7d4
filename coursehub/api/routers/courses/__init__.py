"""
Courses router package.

Exports the public catalog router and the admin routers for course and
curriculum management.
"""

from .admin_router import router as admin_courses_router
from .courses_router import router
from .curriculum_router import router as curriculum_router

__all__ = ["router", "admin_courses_router", "curriculum_router"]
