"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_course_manager,
    get_course_service,
    get_curriculum_service,
    get_current_actor,
    get_enrollment_service,
    get_optional_actor,
    get_progress_service,
    get_settings_dependency,
)

__all__ = [
    "get_course_manager",
    "get_course_service",
    "get_curriculum_service",
    "get_current_actor",
    "get_enrollment_service",
    "get_optional_actor",
    "get_progress_service",
    "get_settings_dependency",
]
