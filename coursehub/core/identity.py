"""
Acting user identity and capability checks.

Identity is established upstream by the auth gateway; this module only
models the already-verified actor and the role capability sets.

Dependencies: None (pure domain layer)
System role: Role checks at the service boundary
"""

import enum
from dataclasses import dataclass

from coursehub.core.exceptions import UnauthorizedError


class Role(str, enum.Enum):
    """
    Roles forwarded by the auth gateway.

    ADMIN: Site owner; full course management
    INSTRUCTOR: Course author; full course management
    STUDENT: Customer account; enrollment and progress only
    """

    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"


COURSE_MANAGERS = frozenset({Role.ADMIN, Role.INSTRUCTOR})


@dataclass(frozen=True)
class Actor:
    """Authenticated user performing a request."""

    user_id: str
    role: Role = Role.STUDENT

    @property
    def can_manage_courses(self) -> bool:
        return self.role in COURSE_MANAGERS


def require_course_manager(actor: Actor) -> None:
    """
    Ensure the actor may create, edit, or delete course content.

    Raises:
        UnauthorizedError: If the actor role is not a course manager
    """
    if not actor.can_manage_courses:
        raise UnauthorizedError(
            "Course management requires an admin or instructor role",
            user_id=actor.user_id,
            role=actor.role.value,
        )
