"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    admin_courses_router,
    courses_router,
    curriculum_router,
    health_router,
    student_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(courses_router)
api_router.include_router(admin_courses_router)
api_router.include_router(curriculum_router)
api_router.include_router(student_router)

__all__ = ["api_router"]
