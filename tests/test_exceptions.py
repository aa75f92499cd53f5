"""Tests for custom exceptions."""

from fastapi import HTTPException

from jobtrack.core.exceptions import (
    ApplicationError,
    ApplicationNotFoundError,
    AuthenticationError,
    EmptyInputError,
    UpstreamFetchError,
    bad_gateway_exception,
    not_found_exception,
    unauthorized_exception,
)


class TestApplicationErrors:
    """Tests for the application error hierarchy."""

    def test_base_error_message(self):
        error = ApplicationError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_empty_input_default_message(self):
        """Test EmptyInputError default message."""
        error = EmptyInputError()
        assert isinstance(error, ApplicationError)
        assert "No applications" in error.message

    def test_upstream_fetch_error(self):
        """Test UpstreamFetchError keeps the source."""
        error = UpstreamFetchError("supabase", "HTTP 500: oops")
        assert error.source == "supabase"
        assert error.detail == "HTTP 500: oops"
        assert str(error) == "supabase error: HTTP 500: oops"

    def test_not_found_error(self):
        """Test ApplicationNotFoundError message."""
        error = ApplicationNotFoundError("abc")
        assert error.application_id == "abc"
        assert "abc" in str(error)

    def test_authentication_error(self):
        error = AuthenticationError()
        assert error.detail == "Authentication failed"


class TestHTTPExceptionHelpers:
    """Tests for HTTP exception factories."""

    def test_unauthorized(self):
        """Test 401 helper."""
        exc = unauthorized_exception("Missing user")
        assert isinstance(exc, HTTPException)
        assert exc.status_code == 401
        assert exc.detail == "Missing user"
        assert exc.headers == {"WWW-Authenticate": "Bearer"}

    def test_not_found(self):
        """Test 404 helper."""
        exc = not_found_exception()
        assert exc.status_code == 404
        assert exc.detail == "Resource not found"

    def test_bad_gateway(self):
        """Test 502 helper."""
        exc = bad_gateway_exception("supabase error: timeout")
        assert exc.status_code == 502
        assert "timeout" in exc.detail
