"""
Course ORM model.

Represents a free or paid course authored by an instructor.
Courses own their sections, which own their lessons.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Course persistence
"""

import enum

from sqlalchemy import Boolean, Enum, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseLevel(str, enum.Enum):
    """Difficulty level shown in the catalog."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CourseStatus(str, enum.Enum):
    """
    Publication state.

    DRAFT: Visible to course managers only; enrollment rejected
    PUBLISHED: Listed in the public catalog; enrollment allowed
    """

    DRAFT = "draft"
    PUBLISHED = "published"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title (255 char limit)
        slug: URL slug derived from the title (unique)
        description: Long description
        thumbnail: Thumbnail URL on the asset host
        price: List price; ignored for enrollment when is_free is set
        is_free: Free courses are fully visible and enrollable without payment
        level: CourseLevel
        status: CourseStatus
        instructor_id: Opaque user id of the author
        sections: Ordered SectionModel rows (cascade delete)
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Constraints:
        slug: UNIQUE
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    thumbnail: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    is_free: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    level: Mapped[CourseLevel] = mapped_column(
        Enum(CourseLevel, native_enum=False, values_callable=_enum_values, length=32),
        nullable=False,
        default=CourseLevel.BEGINNER,
    )

    status: Mapped[CourseStatus] = mapped_column(
        Enum(CourseStatus, native_enum=False, values_callable=_enum_values, length=32),
        nullable=False,
        default=CourseStatus.DRAFT,
        index=True,
    )

    instructor_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships
    sections = relationship(
        "SectionModel",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[SectionModel.order_index, SectionModel.created_at]",
    )
    enrollments = relationship(
        "EnrollmentModel",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
