"""
Course domain models and schemas.

Request/response schemas for course catalog operations.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from coursehub.models.curriculum import SectionResponse


class CreateCourseRequest(BaseModel):
    """
    Request schema for creating a new course.

    level and status are plain strings so that unknown values are reported
    by the service as invalid course data; empty means the default.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Course title")
    description: str = Field(default="", description="Course description")
    thumbnail: str = Field(default="", max_length=1024, description="Thumbnail URL")
    price: float = Field(default=0.0, ge=0, description="Listed price")
    is_free: bool = Field(default=False, description="Whether the course is free")
    level: str | None = Field(default=None, description="beginner, intermediate or advanced")
    status: str | None = Field(default=None, description="draft or published")


class UpdateCourseRequest(BaseModel):
    """Request schema for a partial course update."""

    title: str | None = Field(None, min_length=1, max_length=255, description="Course title")
    description: str | None = Field(None, description="Course description")
    thumbnail: str | None = Field(None, max_length=1024, description="Thumbnail URL")
    price: float | None = Field(None, ge=0, description="Listed price")
    is_free: bool | None = Field(None, description="Whether the course is free")
    level: str | None = Field(None, description="beginner, intermediate or advanced")
    status: str | None = Field(None, description="draft or published")


class CourseListParams(BaseModel):
    """Catalog query parameters; page and limit are normalized by the service."""

    page: int = 1
    limit: int = 10
    level: str | None = None
    is_free: bool | None = None
    instructor: str | None = None
    search: str | None = None


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: uuid.UUID
    title: str
    slug: str
    description: str
    thumbnail: str
    price: float
    is_free: bool
    level: str
    status: str
    instructor_id: str
    total_lessons: int = 0
    total_duration: int = Field(default=0, description="Sum of lesson video durations in seconds")
    is_enrolled: bool = False
    sections: list[SectionResponse] | None = None
    created_at: datetime
    updated_at: datetime


class CourseListResponse(BaseModel):
    """Paginated catalog page."""

    courses: list[CourseResponse]
    total: int
    page: int
    total_pages: int
