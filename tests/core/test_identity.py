"""
Test suite for actor roles and the exception hierarchy.

System role: Verification of capability checks and error taxonomy
"""

import pytest

from coursehub.core.exceptions import (
    AlreadyEnrolledError,
    ConflictError,
    CourseHubError,
    CourseNotFoundError,
    CourseNotPublishedError,
    InvalidCourseDataError,
    InvalidStateError,
    NotEnrolledError,
    NotFoundError,
    PaymentRequiredError,
    UnauthorizedError,
)
from coursehub.core.identity import Actor, Role, require_course_manager


class TestRequireCourseManager:
    """Test suite for require_course_manager()."""

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.INSTRUCTOR])
    def test_managers_pass(self, role: Role) -> None:
        require_course_manager(Actor(user_id="u1", role=role))

    def test_student_is_rejected(self) -> None:
        """Test students cannot manage courses and the error carries context."""
        with pytest.raises(UnauthorizedError) as exc_info:
            require_course_manager(Actor(user_id="u1"))

        assert exc_info.value.details == {"user_id": "u1", "role": "student"}

    def test_default_role_is_student(self) -> None:
        assert Actor(user_id="u1").role is Role.STUDENT


class TestExceptionHierarchy:
    """Test suite for exception classification."""

    @pytest.mark.parametrize(
        ("error", "category"),
        [
            (CourseNotFoundError("intro"), NotFoundError),
            (NotEnrolledError("u1", "c1"), NotFoundError),
            (AlreadyEnrolledError("u1", "c1"), ConflictError),
            (CourseNotPublishedError("c1"), InvalidStateError),
            (PaymentRequiredError("c1"), InvalidStateError),
            (InvalidCourseDataError("bad level", field="level"), InvalidStateError),
        ],
    )
    def test_errors_belong_to_their_category(
        self, error: CourseHubError, category: type[CourseHubError]
    ) -> None:
        assert isinstance(error, category)
        assert isinstance(error, CourseHubError)

    def test_str_includes_details(self) -> None:
        error = CourseNotFoundError("intro-to-go")

        assert error.message == "Course not found: intro-to-go"
        assert "intro-to-go" in str(error)
        assert "Details" in str(error)
