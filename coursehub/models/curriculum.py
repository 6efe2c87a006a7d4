"""
Curriculum models and schemas.

Request/response schemas for sections and lessons.

Dependencies: pydantic
System role: Curriculum API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateSectionRequest(BaseModel):
    """Request schema for adding a section to a course."""

    course_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=255, description="Section title")
    description: str = Field(default="", description="Section description")
    order_index: int = Field(default=0, description="Position within the course")


class UpdateSectionRequest(BaseModel):
    """Request schema for a partial section update."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    order_index: int | None = None


class CreateLessonRequest(BaseModel):
    """Request schema for adding a lesson to a section."""

    section_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=255, description="Lesson title")
    description: str = ""
    content: str = ""
    video_url: str = Field(default="", max_length=1024)
    video_duration: int = Field(default=0, ge=0, description="Video length in seconds")
    order_index: int = Field(default=0, description="Position within the section")
    is_preview: bool = Field(default=False, description="Visible without enrollment")


class UpdateLessonRequest(BaseModel):
    """Request schema for a partial lesson update."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    content: str | None = None
    video_url: str | None = Field(None, max_length=1024)
    video_duration: int | None = Field(None, ge=0)
    order_index: int | None = None
    is_preview: bool | None = None


class LessonResponse(BaseModel):
    """Response schema for a lesson."""

    id: uuid.UUID
    section_id: uuid.UUID
    title: str
    description: str
    content: str
    video_url: str
    video_duration: int
    order_index: int
    is_preview: bool
    is_completed: bool = False
    created_at: datetime
    updated_at: datetime


class SectionResponse(BaseModel):
    """Response schema for a section with its lessons."""

    id: uuid.UUID
    course_id: uuid.UUID
    title: str
    description: str
    order_index: int
    lessons: list[LessonResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
