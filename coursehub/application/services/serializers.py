"""
ORM to dict conversion for service results.

Services return plain dicts; routers turn them into response models.

Dependencies: coursehub.boundary.db.models
System role: Service result shaping
"""

from typing import Any, Iterable
from uuid import UUID

from coursehub.boundary.db.models import (
    CourseModel,
    EnrollmentModel,
    LessonModel,
    LessonProgressModel,
    SectionModel,
)


def lesson_to_dict(lesson: LessonModel, completed_ids: set[UUID] | None = None) -> dict[str, Any]:
    return {
        "id": lesson.id,
        "section_id": lesson.section_id,
        "title": lesson.title,
        "description": lesson.description,
        "content": lesson.content,
        "video_url": lesson.video_url,
        "video_duration": lesson.video_duration,
        "order_index": lesson.order_index,
        "is_preview": lesson.is_preview,
        "is_completed": bool(completed_ids) and lesson.id in completed_ids,
        "created_at": lesson.created_at,
        "updated_at": lesson.updated_at,
    }


def section_to_dict(
    section: SectionModel,
    lessons: Iterable[LessonModel] = (),
    completed_ids: set[UUID] | None = None,
) -> dict[str, Any]:
    """
    Convert a section and the given lessons.

    Lessons are passed explicitly so that a freshly created section does
    not trigger a lazy load of its relationship.
    """
    return {
        "id": section.id,
        "course_id": section.course_id,
        "title": section.title,
        "description": section.description,
        "order_index": section.order_index,
        "lessons": [lesson_to_dict(lesson, completed_ids) for lesson in lessons],
        "created_at": section.created_at,
        "updated_at": section.updated_at,
    }


def curriculum_to_dicts(
    sections: Iterable[SectionModel],
    completed_ids: set[UUID] | None = None,
) -> list[dict[str, Any]]:
    """Convert sections with loaded lessons into nested dicts."""
    return [section_to_dict(s, s.lessons, completed_ids) for s in sections]


def course_to_dict(
    course: CourseModel,
    *,
    total_lessons: int = 0,
    total_duration: int = 0,
    is_enrolled: bool = False,
    sections: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "id": course.id,
        "title": course.title,
        "slug": course.slug,
        "description": course.description,
        "thumbnail": course.thumbnail,
        "price": course.price,
        "is_free": course.is_free,
        "level": course.level.value,
        "status": course.status.value,
        "instructor_id": course.instructor_id,
        "total_lessons": total_lessons,
        "total_duration": total_duration,
        "is_enrolled": is_enrolled,
        "sections": sections,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


def enrollment_to_dict(
    enrollment: EnrollmentModel,
    progress: int | None = None,
    course: CourseModel | None = None,
) -> dict[str, Any]:
    """
    Convert an enrollment, optionally overriding the cached progress.

    When a course is given, its summary is attached under "course".
    """
    data: dict[str, Any] = {
        "id": enrollment.id,
        "user_id": enrollment.user_id,
        "course_id": enrollment.course_id,
        "enrolled_at": enrollment.enrolled_at,
        "completed_at": enrollment.completed_at,
        "progress": enrollment.progress if progress is None else progress,
        "course": None,
    }
    if course is not None:
        data["course"] = {
            "id": course.id,
            "title": course.title,
            "slug": course.slug,
            "thumbnail": course.thumbnail,
            "level": course.level.value,
        }
    return data


def lesson_progress_to_dict(progress: LessonProgressModel) -> dict[str, Any]:
    return {
        "id": progress.id,
        "user_id": progress.user_id,
        "lesson_id": progress.lesson_id,
        "completed": progress.completed,
        "completed_at": progress.completed_at,
        "watch_duration": progress.watch_duration,
        "last_watched_at": progress.last_watched_at,
    }
