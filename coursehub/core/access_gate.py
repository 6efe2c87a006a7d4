"""
Lesson visibility for course viewers.

Decides which lessons of a curriculum a viewer may see. Enrolled viewers
and viewers of free courses see everything; everyone else only sees
preview lessons. Hidden lessons are removed, not redacted.

Dependencies: None (pure domain layer)
System role: Premium content gating
"""

from typing import Any


def has_full_access(is_enrolled: bool, is_free: bool) -> bool:
    """Return True when every lesson of the course is visible."""
    return is_enrolled or is_free


def filter_curriculum(
    sections: list[dict[str, Any]],
    *,
    is_enrolled: bool,
    is_free: bool,
) -> list[dict[str, Any]]:
    """
    Apply the access gate to a curriculum.

    Sections are always kept, even when no lesson survives the filter.
    The input is not mutated.

    Args:
        sections: Section dicts, each with a "lessons" list of lesson dicts
        is_enrolled: Whether the viewer is enrolled in the course
        is_free: Whether the course is free

    Returns:
        list[dict]: New section dicts with the visible lessons
    """
    full_access = has_full_access(is_enrolled, is_free)
    gated = []
    for section in sections:
        lessons = section.get("lessons", [])
        if not full_access:
            lessons = [lesson for lesson in lessons if lesson.get("is_preview")]
        gated.append({**section, "lessons": [dict(lesson) for lesson in lessons]})
    return gated
