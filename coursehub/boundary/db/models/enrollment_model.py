"""
Enrollment ORM model.

Grants a user access to the full content of a course and caches the
user's progress percentage for that course.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Enrollment persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, UUIDMixin, utcnow


class EnrollmentModel(Base, UUIDMixin):
    """
    Enrollment ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Opaque id of the enrolled user
        course_id: Enrolled course (CASCADE on course deletion)
        enrolled_at: Enrollment timestamp (UTC)
        completed_at: Set when cached progress first reaches 100
        progress: Cached completion percentage (0-100)

    Constraints:
        (user_id, course_id): UNIQUE; one enrollment per user per course
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
    )

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    progress: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Progress percentage (0-100)",
    )

    # Relationships
    course = relationship("CourseModel", back_populates="enrollments")
