"""Core application components."""

from jobtrack.core.config import settings
from jobtrack.core.exceptions import (
    ApplicationError,
    ApplicationNotFoundError,
    AuthenticationError,
    EmptyInputError,
    UpstreamFetchError,
)
from jobtrack.core.storage import Base, async_session, init_models

__all__ = [
    "ApplicationError",
    "ApplicationNotFoundError",
    "AuthenticationError",
    "Base",
    "EmptyInputError",
    "UpstreamFetchError",
    "async_session",
    "init_models",
    "settings",
]
