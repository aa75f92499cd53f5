"""Custom exceptions for the application."""

from fastapi import HTTPException, status


class ApplicationError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EmptyInputError(ApplicationError):
    """Raised when an analytics window is requested for zero records."""

    def __init__(self, detail: str = "No applications to analyse"):
        super().__init__(detail)


class UpstreamFetchError(ApplicationError):
    """Raised when a storage collaborator (database, Supabase, files) fails."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"{source} error: {detail}")


class ApplicationNotFoundError(ApplicationError):
    """Raised when a job application does not exist for the current user."""

    def __init__(self, application_id: str):
        self.application_id = application_id
        super().__init__(f"Job application {application_id} not found")


class AuthenticationError(ApplicationError):
    """Raised when authentication fails."""

    def __init__(self, detail: str = "Authentication failed"):
        self.detail = detail
        super().__init__(detail)


def unauthorized_exception(detail: str = "Not authenticated") -> HTTPException:
    """Return a 401 Unauthorized exception."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def bad_gateway_exception(detail: str = "Storage backend unavailable") -> HTTPException:
    """Return a 502 Bad Gateway exception."""
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=detail,
    )
