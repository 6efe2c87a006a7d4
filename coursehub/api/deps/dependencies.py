"""
Dependency injection container.

Factory functions for FastAPI dependencies: settings, services bound to
the request session, and the acting user forwarded by the auth gateway.

Dependencies: coursehub.configs, coursehub.application, coursehub.boundary
System role: DI container for service and identity injection
"""

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services import (
    CourseService,
    CurriculumService,
    EnrollmentService,
    ProgressService,
)
from coursehub.boundary.db import get_async_db
from coursehub.configs import Settings, get_settings
from coursehub.core.identity import Actor, Role

logger = logging.getLogger(__name__)


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        CourseService: Course service with the configured request deadline
    """
    return CourseService(db=db, default_timeout=settings.api.request_timeout_seconds)


def get_curriculum_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CurriculumService:
    """Get curriculum service instance."""
    return CurriculumService(db=db, default_timeout=settings.api.request_timeout_seconds)


def get_enrollment_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> EnrollmentService:
    """Get enrollment service instance."""
    return EnrollmentService(db=db, default_timeout=settings.api.request_timeout_seconds)


def get_progress_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> ProgressService:
    """Get progress service instance."""
    return ProgressService(db=db, default_timeout=settings.api.request_timeout_seconds)


def get_optional_actor(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> Actor | None:
    """
    Read the acting user from the trusted gateway headers.

    Tokens are verified upstream; this only reads the forwarded user id and
    role. A missing or unknown role is treated as student.

    Args:
        request: Incoming request
        settings: Application settings naming the identity headers

    Returns:
        Actor | None: The actor, None for anonymous requests
    """
    user_id = request.headers.get(settings.api.user_id_header, "").strip()
    if not user_id:
        return None

    raw_role = request.headers.get(settings.api.user_role_header, "").strip().lower()
    try:
        role = Role(raw_role) if raw_role else Role.STUDENT
    except ValueError:
        logger.warning("Unknown role header", extra={"user_id": user_id, "role": raw_role})
        role = Role.STUDENT
    return Actor(user_id=user_id, role=role)


def get_current_actor(actor: Actor | None = Depends(get_optional_actor)) -> Actor:
    """
    Require an authenticated actor.

    Raises:
        HTTPException(401): If no identity was forwarded
    """
    if actor is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")
    return actor


def get_course_manager(actor: Actor = Depends(get_current_actor)) -> Actor:
    """
    Require an actor allowed to manage courses.

    Raises:
        HTTPException(403): If the actor is neither admin nor instructor
    """
    if not actor.can_manage_courses:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Course management requires an admin or instructor role",
        )
    return actor
