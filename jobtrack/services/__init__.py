"""Application services."""

from jobtrack.services.analytics_service import AnalyticsService
from jobtrack.services.application_service import (
    ApplicationService,
    create_application_service,
)
from jobtrack.services.repository import (
    ApplicationRepository,
    SQLApplicationRepository,
)

__all__ = [
    "AnalyticsService",
    "ApplicationRepository",
    "ApplicationService",
    "SQLApplicationRepository",
    "create_application_service",
]
