"""
Curriculum management endpoints.

Routes:
- GET /admin/courses/{id}/curriculum - Sections with lessons
- POST /admin/sections - Create section
- PUT /admin/sections/{id} - Update section
- DELETE /admin/sections/{id} - Delete section with its lessons
- POST /admin/lessons - Create lesson
- PUT /admin/lessons/{id} - Update lesson
- DELETE /admin/lessons/{id} - Delete lesson

All routes require an admin or instructor.

Dependencies: coursehub.application.services, coursehub.models
System role: Curriculum management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from coursehub.api.deps.dependencies import get_course_manager, get_curriculum_service
from coursehub.api.routers.router_utils.error_handling import handle_service_errors
from coursehub.application.services.curriculum_service import CurriculumService
from coursehub.core.identity import Actor
from coursehub.models.curriculum import (
    CreateLessonRequest,
    CreateSectionRequest,
    LessonResponse,
    SectionResponse,
    UpdateLessonRequest,
    UpdateSectionRequest,
)

from .course_responses import (
    map_lesson_to_response,
    map_section_to_response,
    map_sections_to_response,
)
from .course_validators import validate_curriculum_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/courses/{course_id}/curriculum", response_model=list[SectionResponse])
@handle_service_errors
async def get_curriculum(
    course_id: UUID,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> list[SectionResponse]:
    """
    Get the ordered sections of a course with their lessons.

    Raises:
        HTTPException(404): Course not found
    """
    sections = await curriculum_service.get_curriculum(course_id)
    return map_sections_to_response(sections)


@router.post("/sections", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_section(
    request: CreateSectionRequest,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> SectionResponse:
    """
    Add a section to a course.

    Raises:
        HTTPException(404): Course not found
    """
    logger.info(
        "Creating section",
        extra={"course_id": str(request.course_id), "order_index": request.order_index},
    )
    section = await curriculum_service.create_section(
        actor,
        course_id=request.course_id,
        title=request.title,
        description=request.description,
        order_index=request.order_index,
    )
    return map_section_to_response(section)


@router.put("/sections/{section_id}", response_model=SectionResponse)
@handle_service_errors
async def update_section(
    section_id: UUID,
    request: UpdateSectionRequest,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> SectionResponse:
    """
    Partially update a section.

    Raises:
        HTTPException(400): Empty update
        HTTPException(404): Section not found
    """
    validate_curriculum_update(request)
    section = await curriculum_service.update_section(
        actor,
        section_id,
        request.model_dump(exclude_unset=True, exclude_none=True),
    )
    return map_section_to_response(section)


@router.delete(
    "/sections/{section_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@handle_service_errors
async def delete_section(
    section_id: UUID,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> Response:
    """Delete a section, its lessons and their progress. Unknown ids succeed."""
    await curriculum_service.delete_section(actor, section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/lessons", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_lesson(
    request: CreateLessonRequest,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> LessonResponse:
    """
    Add a lesson to a section.

    Raises:
        HTTPException(404): Section not found
    """
    logger.info(
        "Creating lesson",
        extra={"section_id": str(request.section_id), "is_preview": request.is_preview},
    )
    lesson = await curriculum_service.create_lesson(actor, **request.model_dump())
    return map_lesson_to_response(lesson)


@router.put("/lessons/{lesson_id}", response_model=LessonResponse)
@handle_service_errors
async def update_lesson(
    lesson_id: UUID,
    request: UpdateLessonRequest,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> LessonResponse:
    """
    Partially update a lesson.

    Raises:
        HTTPException(400): Empty update
        HTTPException(404): Lesson not found
    """
    validate_curriculum_update(request)
    lesson = await curriculum_service.update_lesson(
        actor,
        lesson_id,
        request.model_dump(exclude_unset=True, exclude_none=True),
    )
    return map_lesson_to_response(lesson)


@router.delete(
    "/lessons/{lesson_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@handle_service_errors
async def delete_lesson(
    lesson_id: UUID,
    actor: Actor = Depends(get_course_manager),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> Response:
    """Delete a lesson and its progress rows. Unknown ids succeed."""
    await curriculum_service.delete_lesson(actor, lesson_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
