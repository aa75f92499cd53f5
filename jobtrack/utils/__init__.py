"""Utility functions and classes."""

from jobtrack.utils.dates import days_between, round_half_up
from jobtrack.utils.validators import (
    ValidationResult,
    apply_terminal_status_rule,
    validate_lifecycle_dates,
)

__all__ = [
    "ValidationResult",
    "apply_terminal_status_rule",
    "days_between",
    "round_half_up",
    "validate_lifecycle_dates",
]
