"""Schemas for job application records."""

from datetime import date, datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ApplicationStatus(str, Enum):
    """Job application statuses."""

    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"


class WorkArrangement(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class ApplicationFields(BaseModel):
    """Optional fields shared by every job application schema."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    area_of_work: str | None = Field(None, description="Area of work, e.g. Backend")
    job_location: str | None = None
    job_type: JobType | None = None
    work_arrangement: WorkArrangement | None = None
    application_method: str | None = Field(
        None, description="Where the application was sent (LinkedIn, Referral...)"
    )
    salary_range: str | None = None
    job_description: str | None = None
    contact_person: str | None = None
    contact_email: str | None = None
    notes: str | None = None

    cv_file_url: str | None = None
    cv_file_name: str | None = None
    cover_letter_url: str | None = None
    cover_letter_name: str | None = None

    application_sent_date: date | None = None
    first_response_date: date | None = None
    interview_scheduled_date: date | None = None
    interview_completed_date: date | None = None
    offer_received_date: date | None = None
    offer_deadline_date: date | None = None
    rejection_date: date | None = None
    withdrawal_date: date | None = None
    follow_up_date: date | None = None


class JobApplicationCreate(ApplicationFields):
    """Request body for creating a job application."""

    company_name: str = Field(..., min_length=1, description="Company name")
    position_title: str = Field(..., min_length=1, description="Position title")
    application_date: date = Field(..., description="Day the application was made")
    status: ApplicationStatus = Field(
        ApplicationStatus.APPLIED,
        validation_alias=AliasChoices("status", "application_status"),
        description="Current application status",
    )


class JobApplicationUpdate(ApplicationFields):
    """Request body for a partial update; only sent fields are changed."""

    company_name: str | None = Field(None, min_length=1)
    position_title: str | None = Field(None, min_length=1)
    application_date: date | None = None
    status: ApplicationStatus | None = Field(
        None, validation_alias=AliasChoices("status", "application_status")
    )


class JobApplication(JobApplicationCreate):
    """A stored job application as read from the repository."""

    id: str
    user_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IncompleteApplications(BaseModel):
    """Applications still missing data, in fetch order."""

    count: int
    items: list[JobApplication]


class NextIncompleteResponse(BaseModel):
    """Next application to backfill and how many remain after it."""

    remaining: int
    item: JobApplication | None
    missing_fields: list[str] = Field(default_factory=list)


class Suggestions(BaseModel):
    """Autocomplete values for the application form."""

    companies: list[str]
    positions: list[str]
    application_methods: list[str]
