"""
Course validation utilities.

Request checks not covered by Pydantic models. Failures are reported as
InvalidCourseDataError and surface as 400 responses.

Dependencies: coursehub.models, coursehub.core.exceptions
System role: Course and curriculum request validation
"""

from pydantic import BaseModel

from coursehub.core.exceptions import InvalidCourseDataError
from coursehub.models.course import CreateCourseRequest, UpdateCourseRequest


def _require_non_blank(value: str | None, field: str) -> None:
    if value is not None and not value.strip():
        raise InvalidCourseDataError(f"{field} cannot be empty or whitespace-only", field=field)


def _require_changes(request: BaseModel) -> None:
    if not request.model_dump(exclude_unset=True, exclude_none=True):
        raise InvalidCourseDataError("At least one field must be provided for update")


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request.

    Raises:
        InvalidCourseDataError: If the title is blank
    """
    _require_non_blank(request.title, "title")


def validate_course_update(request: UpdateCourseRequest) -> None:
    """
    Validate course update request.

    Raises:
        InvalidCourseDataError: If nothing is updated or the title is blank
    """
    _require_changes(request)
    _require_non_blank(request.title, "title")


def validate_curriculum_update(request: BaseModel) -> None:
    """
    Validate a section or lesson update request.

    Raises:
        InvalidCourseDataError: If nothing is updated or the title is blank
    """
    _require_changes(request)
    _require_non_blank(getattr(request, "title", None), "title")
