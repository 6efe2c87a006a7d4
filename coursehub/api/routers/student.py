"""
Student API endpoints.

Routes:
- POST /student/courses/{id}/enroll - Enroll in a free published course
- GET /student/enrollments - List own enrollments with progress
- POST /student/lessons/{id}/complete - Mark lesson complete
- GET /student/courses/{id}/progress - Course progress percentage
- GET /student/lessons/{id}/progress - Lesson progress record

All routes require an authenticated user of any role.

Dependencies: coursehub.application.services, coursehub.models
System role: Enrollment and progress HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import (
    get_current_actor,
    get_enrollment_service,
    get_progress_service,
)
from coursehub.api.routers.router_utils.error_handling import handle_service_errors
from coursehub.application.services.enrollment_service import EnrollmentService
from coursehub.application.services.progress_service import ProgressService
from coursehub.core.identity import Actor
from coursehub.models.common import ErrorResponse, MessageResponse
from coursehub.models.enrollment import (
    EnrollmentResponse,
    LessonProgressResponse,
    ProgressResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student", tags=["student"])


@router.post(
    "/courses/{course_id}/enroll",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
@handle_service_errors
async def enroll_course(
    course_id: UUID,
    actor: Actor = Depends(get_current_actor),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MessageResponse:
    """
    Enroll the caller in a course.

    Raises:
        HTTPException(400): Already enrolled, course not published or not free
        HTTPException(404): Course not found
    """
    await enrollment_service.enroll(actor, course_id)
    return MessageResponse(message="Successfully enrolled in course")


@router.get("/enrollments", response_model=list[EnrollmentResponse])
@handle_service_errors
async def get_my_enrollments(
    actor: Actor = Depends(get_current_actor),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> list[EnrollmentResponse]:
    """List the caller's enrollments, newest first."""
    enrollments = await enrollment_service.get_my_enrollments(actor)
    logger.info(
        "Enrollments retrieved",
        extra={"user_id": actor.user_id, "count": len(enrollments)},
    )
    return [EnrollmentResponse(**enrollment) for enrollment in enrollments]


@router.post("/lessons/{lesson_id}/complete", response_model=MessageResponse)
@handle_service_errors
async def mark_lesson_complete(
    lesson_id: UUID,
    actor: Actor = Depends(get_current_actor),
    progress_service: ProgressService = Depends(get_progress_service),
) -> MessageResponse:
    """
    Mark a lesson complete for the caller.

    Raises:
        HTTPException(404): Lesson not found or caller not enrolled
    """
    await progress_service.mark_lesson_complete(actor, lesson_id)
    return MessageResponse(message="Lesson marked as complete")


@router.get("/courses/{course_id}/progress", response_model=ProgressResponse)
@handle_service_errors
async def get_course_progress(
    course_id: UUID,
    actor: Actor = Depends(get_current_actor),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ProgressResponse:
    """
    Get the caller's progress percentage in a course.

    Raises:
        HTTPException(404): Caller not enrolled
    """
    progress = await progress_service.get_course_progress(actor, course_id)
    return ProgressResponse(course_id=course_id, progress=progress)


@router.get("/lessons/{lesson_id}/progress", response_model=LessonProgressResponse | None)
@handle_service_errors
async def get_lesson_progress(
    lesson_id: UUID,
    actor: Actor = Depends(get_current_actor),
    progress_service: ProgressService = Depends(get_progress_service),
) -> LessonProgressResponse | None:
    """Get the caller's progress record for a lesson; null when none exists."""
    progress = await progress_service.get_lesson_progress(actor.user_id, lesson_id)
    return LessonProgressResponse(**progress) if progress else None
