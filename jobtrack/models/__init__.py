"""Database models."""

from jobtrack.models.application import JobApplicationRecord

__all__ = ["JobApplicationRecord"]
