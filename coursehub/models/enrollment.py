"""
Enrollment and progress schemas.

Dependencies: pydantic
System role: Student API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CourseSummary(BaseModel):
    """Course fields shown next to an enrollment."""

    id: uuid.UUID
    title: str
    slug: str
    thumbnail: str
    level: str


class EnrollmentResponse(BaseModel):
    """Response schema for an enrollment."""

    id: uuid.UUID
    user_id: str
    course_id: uuid.UUID
    enrolled_at: datetime
    completed_at: datetime | None = None
    progress: int = Field(ge=0, le=100)
    course: CourseSummary | None = None


class ProgressResponse(BaseModel):
    """Course progress percentage of the caller."""

    course_id: uuid.UUID
    progress: int = Field(ge=0, le=100)


class LessonProgressResponse(BaseModel):
    """Response schema for per-lesson progress."""

    id: uuid.UUID
    user_id: str
    lesson_id: uuid.UUID
    completed: bool
    completed_at: datetime | None = None
    watch_duration: int = 0
    last_watched_at: datetime | None = None
