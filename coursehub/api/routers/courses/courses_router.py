"""
Public course catalog endpoints.

Routes:
- GET /courses - List published courses
- GET /courses/{slug} - Get course detail with gated curriculum

Dependencies: coursehub.application.services, coursehub.models
System role: Course catalog HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import get_course_service, get_optional_actor
from coursehub.api.routers.router_utils.error_handling import handle_service_errors
from coursehub.application.services.course_service import CourseService
from coursehub.core.identity import Actor
from coursehub.models.common import ErrorResponse
from coursehub.models.course import CourseListParams, CourseListResponse, CourseResponse

from .course_responses import map_course_list_to_response, map_course_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CourseListResponse, responses={400: {"model": ErrorResponse}})
@handle_service_errors
async def list_courses(
    params: CourseListParams = Depends(),
    course_service: CourseService = Depends(get_course_service),
) -> CourseListResponse:
    """
    List published courses, newest first.

    Args:
        params: page, limit, level, is_free, instructor, search
        course_service: Injected CourseService

    Returns:
        CourseListResponse: Page of courses with totals

    Raises:
        HTTPException(400): Unknown level filter
    """
    logger.info("Listing courses", extra=params.model_dump())

    result = await course_service.list_courses(**params.model_dump())

    logger.info(
        "Courses retrieved successfully",
        extra={"count": len(result["courses"]), "total": result["total"]},
    )
    return map_course_list_to_response(result)


@router.get("/{slug}", response_model=CourseResponse, responses={404: {"model": ErrorResponse}})
@handle_service_errors
async def get_course(
    slug: str,
    actor: Actor | None = Depends(get_optional_actor),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get course by slug.

    Anonymous and non-enrolled viewers of paid courses only see preview
    lessons; enrolled viewers also get per-lesson completion flags.

    Args:
        slug: Course slug
        actor: Optional viewer identity
        course_service: Injected CourseService

    Returns:
        CourseResponse: Course with sections

    Raises:
        HTTPException(404): Course not found
    """
    course = await course_service.get_course(slug, actor)
    return map_course_to_response(course)
