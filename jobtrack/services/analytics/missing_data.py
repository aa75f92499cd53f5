"""Detection of applications that still need data backfilled."""

from collections.abc import Sequence

from jobtrack.schemas.application import ApplicationStatus, JobApplication

# Date that must be filled in once an application reaches the status.
STATUS_REQUIRED_DATES = {
    ApplicationStatus.INTERVIEW: "interview_scheduled_date",
    ApplicationStatus.OFFER: "offer_received_date",
    ApplicationStatus.REJECTED: "rejection_date",
}


def missing_fields(record: JobApplication) -> list[str]:
    """Names of the fields that make ``record`` incomplete."""
    missing = []
    if not record.area_of_work:
        missing.append("area_of_work")

    required_date = STATUS_REQUIRED_DATES.get(record.status)
    if required_date and getattr(record, required_date) is None:
        missing.append(required_date)

    if record.application_sent_date is None:
        missing.append("application_sent_date")

    if (
        record.status != ApplicationStatus.APPLIED
        and record.first_response_date is None
    ):
        missing.append("first_response_date")

    return missing


def is_incomplete(record: JobApplication) -> bool:
    return bool(missing_fields(record))


def find_incomplete(
    records: Sequence[JobApplication], exclude_id: str | None = None
) -> list[JobApplication]:
    """Incomplete records in input order, skipping the one being edited."""
    return [
        record
        for record in records
        if record.id != exclude_id and is_incomplete(record)
    ]


def next_incomplete(
    records: Sequence[JobApplication], exclude_id: str | None = None
) -> JobApplication | None:
    """The first incomplete record, or None once everything is filled in."""
    for record in records:
        if record.id != exclude_id and is_incomplete(record):
            return record
    return None
