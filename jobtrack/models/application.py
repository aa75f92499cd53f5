"""Job application model."""

import uuid
from datetime import UTC, date, datetime

from sqlalchemy import Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobtrack.core.storage import Base


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _new_id() -> str:
    return str(uuid.uuid4())


class JobApplicationRecord(Base):
    """Model for tracking a single job application and its lifecycle dates."""

    __tablename__ = "job_applications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    position_title: Mapped[str] = mapped_column(String(255), nullable=False)
    application_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        "application_status", String(20), nullable=False, default="applied"
    )

    area_of_work: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    work_arrangement: Mapped[str | None] = mapped_column(String(20), nullable=True)
    application_method: Mapped[str | None] = mapped_column(String(255), nullable=True)
    salary_range: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_person: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    cv_file_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    cv_file_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cover_letter_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    cover_letter_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    application_sent_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    first_response_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    interview_scheduled_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    interview_completed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    offer_received_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    offer_deadline_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    rejection_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    withdrawal_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    follow_up_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, onupdate=_utc_now
    )
