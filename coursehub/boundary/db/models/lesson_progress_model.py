"""
Lesson progress ORM model.

Per-user, per-lesson completion and watch tracking.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Progress tracking persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, UUIDMixin


class LessonProgressModel(Base, UUIDMixin):
    """
    Lesson progress ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Opaque user id
        lesson_id: Tracked lesson (CASCADE on lesson deletion)
        completed: Whether the lesson was marked complete
        completed_at: Last completion timestamp
        watch_duration: Seconds watched
        last_watched_at: Last activity timestamp

    Constraints:
        (user_id, lesson_id): UNIQUE; rows are upserted
    """

    __tablename__ = "lesson_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "lesson_id", name="uq_lesson_progress_user_lesson"),
    )

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    lesson_id: Mapped[UUID] = mapped_column(
        ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    watch_duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Seconds watched",
    )

    last_watched_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
