"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: coursehub.models
System role: Course and curriculum response transformation
"""

from typing import Any

from coursehub.models.course import CourseListResponse, CourseResponse
from coursehub.models.curriculum import LessonResponse, SectionResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields, optionally with
            nested "sections"

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_course_list_to_response(list_data: dict[str, Any]) -> CourseListResponse:
    """
    Transform a catalog page into CourseListResponse.

    Args:
        list_data: Dictionary with courses, total, page, total_pages

    Returns:
        CourseListResponse: Pydantic model for API response
    """
    return CourseListResponse(
        courses=[map_course_to_response(course) for course in list_data["courses"]],
        total=list_data["total"],
        page=list_data["page"],
        total_pages=list_data["total_pages"],
    )


def map_section_to_response(section_data: dict[str, Any]) -> SectionResponse:
    """Transform a section dictionary (with lessons) into SectionResponse."""
    return SectionResponse(**section_data)


def map_sections_to_response(sections_data: list[dict[str, Any]]) -> list[SectionResponse]:
    """Transform a curriculum into a list of SectionResponse."""
    return [map_section_to_response(section) for section in sections_data]


def map_lesson_to_response(lesson_data: dict[str, Any]) -> LessonResponse:
    """Transform a lesson dictionary into LessonResponse."""
    return LessonResponse(**lesson_data)
