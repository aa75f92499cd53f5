"""Write-side rules for job application records."""

from dataclasses import dataclass, field
from typing import Any

from jobtrack.schemas.application import ApplicationStatus

# (earlier, later) lifecycle dates expected in this order.
LIFECYCLE_ORDER = [
    ("application_date", "application_sent_date"),
    ("application_sent_date", "first_response_date"),
    ("first_response_date", "interview_scheduled_date"),
    ("interview_scheduled_date", "interview_completed_date"),
    ("interview_completed_date", "offer_received_date"),
    ("interview_completed_date", "rejection_date"),
    ("offer_received_date", "offer_deadline_date"),
]


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


def apply_terminal_status_rule(values: dict[str, Any]) -> dict[str, Any]:
    """Keep rejection and withdrawal mutually exclusive.

    Setting a rejection date clears the withdrawal date and forces the
    ``rejected`` status; setting a withdrawal date does the reverse. When a
    single write sets both, the rejection wins.
    """
    result = dict(values)
    if result.get("rejection_date"):
        result["withdrawal_date"] = None
        result["status"] = ApplicationStatus.REJECTED
    elif result.get("withdrawal_date"):
        result["rejection_date"] = None
        result["status"] = ApplicationStatus.WITHDRAWN
    return result


def validate_lifecycle_dates(values: dict[str, Any]) -> ValidationResult:
    """Check a full set of record values before it is written.

    Out-of-order dates only produce warnings, since analytics discard
    negative intervals anyway.
    """
    if values.get("offer_received_date") and values.get("rejection_date"):
        return ValidationResult(
            is_valid=False,
            error="An application cannot have both an offer and a rejection date",
        )

    warnings = []
    for earlier, later in LIFECYCLE_ORDER:
        start = values.get(earlier)
        end = values.get(later)
        if start and end and end < start:
            warnings.append(f"{later} ({end}) is before {earlier} ({start})")

    return ValidationResult(is_valid=True, warnings=warnings)
