"""API routers."""

from jobtrack.routers.analytics import router as analytics_router
from jobtrack.routers.applications import router as applications_router

__all__ = ["analytics_router", "applications_router"]
