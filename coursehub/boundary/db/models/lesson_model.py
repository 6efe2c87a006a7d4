"""
Lesson ORM model.

The atomic content unit of a course: a video, a text body, or both.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Lesson content persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, UUIDMixin, TimestampMixin


class LessonModel(Base, UUIDMixin, TimestampMixin):
    """
    Lesson ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        section_id: Owning section (CASCADE on section deletion)
        title: Lesson title
        description: Short summary
        content: Body for text lessons
        video_url: Video location (e.g. a YouTube URL)
        video_duration: Video length in seconds
        order_index: Display position within the section
        is_preview: Visible to viewers without access to the full course
    """

    __tablename__ = "lessons"

    section_id: Mapped[UUID] = mapped_column(
        ForeignKey("course_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    video_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    video_duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Video duration in seconds",
    )

    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_preview: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    section = relationship("SectionModel", back_populates="lessons")
