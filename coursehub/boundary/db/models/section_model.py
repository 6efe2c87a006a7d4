"""
Section ORM model.

An ordered grouping of lessons inside a course.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Curriculum structure persistence
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SectionModel(Base, UUIDMixin, TimestampMixin):
    """
    Section ORM model.

    order_index controls display order only; duplicates and gaps are
    allowed. Deleting a section deletes its lessons.

    Attributes:
        id: UUID primary key (auto-generated)
        course_id: Owning course (CASCADE on course deletion)
        title: Section title
        description: Section description
        order_index: Display position within the course
        lessons: Ordered LessonModel rows (cascade delete)
    """

    __tablename__ = "course_sections"

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    course = relationship("CourseModel", back_populates="sections")
    lessons = relationship(
        "LessonModel",
        back_populates="section",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[LessonModel.order_index, LessonModel.created_at]",
    )
