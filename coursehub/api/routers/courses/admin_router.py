"""
Course management endpoints.

Routes:
- POST /admin/courses - Create course
- GET /admin/courses - List all courses including drafts
- GET /admin/courses/{id} - Get course with full curriculum
- PUT /admin/courses/{id} - Update course
- DELETE /admin/courses/{id} - Delete course and everything under it

All routes require an admin or instructor.

Dependencies: coursehub.application.services, coursehub.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from coursehub.api.deps.dependencies import get_course_manager, get_course_service
from coursehub.api.routers.router_utils.error_handling import handle_service_errors
from coursehub.application.services.course_service import CourseService
from coursehub.core.identity import Actor
from coursehub.models.course import (
    CourseListParams,
    CourseListResponse,
    CourseResponse,
    CreateCourseRequest,
    UpdateCourseRequest,
)

from .course_responses import map_course_list_to_response, map_course_to_response
from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/courses", tags=["admin"])


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_course(
    request: CreateCourseRequest,
    actor: Actor = Depends(get_course_manager),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course owned by the caller.

    Raises:
        HTTPException(400): Blank title or unknown level/status
        HTTPException(401): No identity
        HTTPException(403): Not a course manager
    """
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"course_title": request.title, "instructor_id": actor.user_id},
    )

    course = await course_service.create_course(actor, **request.model_dump())

    logger.info(
        "Course created successfully",
        extra={"course_id": str(course["id"]), "slug": course["slug"]},
    )
    return map_course_to_response(course)


@router.get("", response_model=CourseListResponse)
@handle_service_errors
async def list_all_courses(
    params: CourseListParams = Depends(),
    actor: Actor = Depends(get_course_manager),
    course_service: CourseService = Depends(get_course_service),
) -> CourseListResponse:
    """List all courses, drafts included, newest first."""
    result = await course_service.list_all_courses(actor, **params.model_dump())
    return map_course_list_to_response(result)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def get_course_by_id(
    course_id: UUID,
    actor: Actor = Depends(get_course_manager),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get course by ID with its full, ungated curriculum.

    Raises:
        HTTPException(404): Course not found
    """
    course = await course_service.get_course_by_id(actor, course_id)
    return map_course_to_response(course)


@router.put("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    actor: Actor = Depends(get_course_manager),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Partially update a course; a new title regenerates the slug.

    Raises:
        HTTPException(400): Empty update or unknown level/status
        HTTPException(404): Course not found
    """
    validate_course_update(request)
    fields = request.model_dump(exclude_unset=True, exclude_none=True)

    logger.info(
        "Updating course",
        extra={"course_id": str(course_id), "fields": sorted(fields)},
    )

    course = await course_service.update_course(actor, course_id, fields)
    return map_course_to_response(course)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@handle_service_errors
async def delete_course(
    course_id: UUID,
    actor: Actor = Depends(get_course_manager),
    course_service: CourseService = Depends(get_course_service),
) -> Response:
    """
    Delete course with its sections, lessons, progress and enrollments.

    Raises:
        HTTPException(404): Course not found
    """
    logger.info("Deleting course", extra={"course_id": str(course_id)})

    await course_service.delete_course(actor, course_id)

    logger.info("Course deleted successfully", extra={"course_id": str(course_id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
