"""
Exception hierarchy for the course platform.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseHubError(Exception):
    """Base exception for all course platform errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(CourseHubError):
    """Raised when a requested resource does not exist."""


class ConflictError(CourseHubError):
    """Raised when a write collides with existing state."""


class InvalidStateError(CourseHubError):
    """Raised when an operation is not allowed in the current state."""


class UnauthorizedError(CourseHubError):
    """Raised when the acting user lacks the capability for an operation."""

    def __init__(
        self,
        message: str,
        user_id: str | None = None,
        role: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unauthorized error.

        Args:
            message: Error message
            user_id: Acting user id
            role: Acting user role
            details: Additional context
        """
        details = details or {}
        if user_id:
            details["user_id"] = user_id
        if role:
            details["role"] = role
        super().__init__(message, details)


class OperationTimeoutError(CourseHubError):
    """Raised when an operation exceeds its deadline."""

    def __init__(
        self,
        operation: str,
        timeout: float,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize timeout error.

        Args:
            operation: Name of the operation that timed out
            timeout: Deadline in seconds
            details: Additional context
        """
        details = details or {}
        details["operation"] = operation
        details["timeout_seconds"] = timeout
        super().__init__(f"Operation '{operation}' timed out after {timeout}s", details)


class CourseNotFoundError(NotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_ref: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize course not found error.

        Args:
            course_ref: Course id or slug that did not resolve
            details: Additional context
        """
        details = details or {}
        details["course"] = course_ref
        super().__init__(f"Course not found: {course_ref}", details)


class SectionNotFoundError(NotFoundError):
    """Raised when a section cannot be found."""

    def __init__(self, section_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["section_id"] = section_id
        super().__init__(f"Section not found: {section_id}", details)


class LessonNotFoundError(NotFoundError):
    """Raised when a lesson cannot be found."""

    def __init__(self, lesson_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["lesson_id"] = lesson_id
        super().__init__(f"Lesson not found: {lesson_id}", details)


class NotEnrolledError(NotFoundError):
    """Raised when a user has no enrollment for a course."""

    def __init__(
        self,
        user_id: str,
        course_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"user_id": user_id, "course_id": course_id})
        super().__init__("Not enrolled in this course", details)


class AlreadyEnrolledError(ConflictError):
    """Raised when a user is already enrolled in a course."""

    def __init__(
        self,
        user_id: str,
        course_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"user_id": user_id, "course_id": course_id})
        super().__init__("Already enrolled in this course", details)


class CourseNotPublishedError(InvalidStateError):
    """Raised when enrolling in a course that is not published."""

    def __init__(self, course_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["course_id"] = course_id
        super().__init__("Course is not published", details)


class PaymentRequiredError(InvalidStateError):
    """Raised when enrolling in a paid course. Payments are not supported."""

    def __init__(self, course_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["course_id"] = course_id
        super().__init__("Payment required for this course", details)


class InvalidCourseDataError(InvalidStateError):
    """Raised when course input fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
