"""FastAPI dependencies for repositories, services and the current user."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header

from jobtrack.core.config import settings
from jobtrack.core.exceptions import AuthenticationError, unauthorized_exception
from jobtrack.services.analytics_service import AnalyticsService
from jobtrack.services.application_service import (
    ApplicationService,
    create_application_service,
)
from jobtrack.services.repository import ApplicationRepository, SQLApplicationRepository
from jobtrack.services.supabase_client import create_supabase_repository


async def get_repository() -> AsyncGenerator[ApplicationRepository, None]:
    """Repository for the configured backend, closed after the request."""
    if settings.repository_backend == "supabase":
        async with create_supabase_repository() as repository:
            yield repository
    else:
        yield SQLApplicationRepository()


def resolve_user_id(header_value: str | None) -> str:
    """User id from the X-User-Id header, else the single-user default.

    Raises:
        AuthenticationError: if neither is available.
    """
    user_id = header_value or settings.default_user_id
    if not user_id:
        raise AuthenticationError("Missing X-User-Id header")
    return user_id


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    try:
        return resolve_user_id(x_user_id)
    except AuthenticationError as e:
        raise unauthorized_exception(e.detail)


def get_application_service(
    repository: ApplicationRepository = Depends(get_repository),
) -> ApplicationService:
    return create_application_service(repository)


def get_analytics_service(
    repository: ApplicationRepository = Depends(get_repository),
) -> AnalyticsService:
    return AnalyticsService(repository)
