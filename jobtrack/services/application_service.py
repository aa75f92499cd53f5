"""Application service for job application records."""

import logging
from typing import Literal

from jobtrack.core.config import settings
from jobtrack.schemas.application import (
    JobApplication,
    JobApplicationCreate,
    JobApplicationUpdate,
    NextIncompleteResponse,
    Suggestions,
)
from jobtrack.services.analytics.missing_data import (
    find_incomplete,
    missing_fields,
    next_incomplete,
)
from jobtrack.services.file_storage import FileStorage
from jobtrack.services.repository import ApplicationRepository
from jobtrack.utils.validators import (
    apply_terminal_status_rule,
    validate_lifecycle_dates,
)

logger = logging.getLogger(__name__)

AttachmentKind = Literal["cv", "cover_letter"]

# (url field, name field, storage folder) per attachment kind.
ATTACHMENT_FIELDS: dict[str, tuple[str, str, str]] = {
    "cv": ("cv_file_url", "cv_file_name", "cv"),
    "cover_letter": ("cover_letter_url", "cover_letter_name", "cover-letters"),
}

REQUIRED_FIELDS = ("company_name", "position_title", "application_date", "status")

DEFAULT_COMPANIES = [
    "Google", "Microsoft", "Apple", "Amazon", "Meta", "Netflix", "Tesla", "Uber",
    "Airbnb", "Spotify", "LinkedIn", "Twitter", "Adobe", "Salesforce", "Oracle",
]

DEFAULT_POSITIONS = [
    "Software Engineer", "Frontend Developer", "Backend Developer",
    "Full Stack Developer", "Data Scientist", "Product Manager", "UX Designer",
    "DevOps Engineer", "Mobile Developer", "QA Engineer", "Technical Lead",
    "Engineering Manager",
]

DEFAULT_APPLICATION_METHODS = [
    "Company Website", "LinkedIn", "Indeed", "Glassdoor", "AngelList", "Referral",
    "Job Fair", "Recruiter", "Direct Email", "GitHub Jobs", "Stack Overflow Jobs",
]


def _merge_unique(defaults: list[str], values: list[str | None]) -> list[str]:
    """Defaults first, then new non-empty values, without duplicates."""
    return list(dict.fromkeys([*defaults, *(value for value in values if value)]))


class ApplicationService:
    """Creates, edits and backfills a user's job applications."""

    def __init__(self, repository: ApplicationRepository):
        self.repository = repository

    async def list_applications(self, user_id: str) -> list[JobApplication]:
        return await self.repository.fetch_all(user_id)

    async def get_application(self, user_id: str, application_id: str) -> JobApplication:
        return await self.repository.get(user_id, application_id)

    async def create_application(
        self, user_id: str, request: JobApplicationCreate
    ) -> JobApplication:
        """Create a record after applying the terminal-status rule.

        Raises:
            ValueError: if the lifecycle dates are contradictory.
        """
        values = apply_terminal_status_rule(request.model_dump())
        self._check_lifecycle(values)
        return await self.repository.create(user_id, values)

    async def update_application(
        self, user_id: str, application_id: str, request: JobApplicationUpdate
    ) -> JobApplication:
        """Apply a partial update; fields not sent are left untouched."""
        changes = request.model_dump(exclude_unset=True)
        for key in REQUIRED_FIELDS:
            if key in changes and changes[key] is None:
                changes.pop(key)
        changes = apply_terminal_status_rule(changes)

        current = await self.repository.get(user_id, application_id)
        self._check_lifecycle({**current.model_dump(), **changes})

        return await self.repository.update(user_id, application_id, changes)

    async def delete_application(self, user_id: str, application_id: str) -> None:
        await self.repository.delete(user_id, application_id)

    async def incomplete_applications(
        self, user_id: str, exclude_id: str | None = None
    ) -> list[JobApplication]:
        return await self.repository.fetch_missing_data_candidates(user_id, exclude_id)

    async def next_incomplete(
        self, user_id: str, exclude_id: str | None = None
    ) -> NextIncompleteResponse:
        """The next record to backfill and how many incomplete ones remain."""
        records = await self.repository.fetch_all(user_id)
        item = next_incomplete(records, exclude_id)
        if item is None:
            return NextIncompleteResponse(remaining=0, item=None)

        return NextIncompleteResponse(
            remaining=len(find_incomplete(records, exclude_id)),
            item=item,
            missing_fields=missing_fields(item),
        )

    async def attach_file(
        self,
        user_id: str,
        application_id: str,
        kind: AttachmentKind,
        filename: str,
        content: bytes,
        storage: FileStorage,
    ) -> JobApplication:
        """Store an attachment and link it to the application."""
        if not content:
            raise ValueError("Attachment is empty")
        if len(content) > settings.max_attachment_bytes:
            raise ValueError(
                f"Attachment exceeds {settings.max_attachment_bytes} bytes"
            )

        await self.repository.get(user_id, application_id)

        url_field, name_field, folder = ATTACHMENT_FIELDS[kind]
        stored = await storage.store(user_id, folder, filename, content)
        return await self.repository.update(
            user_id,
            application_id,
            {url_field: stored.public_url, name_field: filename},
        )

    async def suggestions(self, user_id: str) -> Suggestions:
        """Autocomplete values merged from defaults and the user's records."""
        records = await self.repository.fetch_all(user_id)
        return Suggestions(
            companies=_merge_unique(
                DEFAULT_COMPANIES, [r.company_name for r in records]
            ),
            positions=_merge_unique(
                DEFAULT_POSITIONS, [r.position_title for r in records]
            ),
            application_methods=_merge_unique(
                DEFAULT_APPLICATION_METHODS, [r.application_method for r in records]
            ),
        )

    @staticmethod
    def _check_lifecycle(values: dict) -> None:
        validation = validate_lifecycle_dates(values)
        if not validation.is_valid:
            raise ValueError(validation.error)
        for warning in validation.warnings:
            logger.warning(f"Lifecycle dates out of order: {warning}")


def create_application_service(repository: ApplicationRepository) -> ApplicationService:
    """Factory function to create application service."""
    return ApplicationService(repository)
