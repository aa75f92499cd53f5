"""Tests for ApplicationService."""

from datetime import date

import pytest

from jobtrack.core.exceptions import ApplicationNotFoundError
from jobtrack.schemas.application import (
    ApplicationStatus,
    JobApplicationCreate,
    JobApplicationUpdate,
)
from jobtrack.services.application_service import (
    DEFAULT_COMPANIES,
    ApplicationService,
    create_application_service,
)
from jobtrack.services.file_storage import LocalFileStorage


@pytest.fixture
def service(memory_repository):
    """ApplicationService over the scenario records."""
    return ApplicationService(memory_repository)


class TestApplicationServiceInit:
    """Tests for ApplicationService initialization."""

    def test_factory(self, memory_repository):
        """Test the factory wires the repository."""
        service = create_application_service(memory_repository)
        assert service.repository is memory_repository


class TestCreateApplication:
    """Tests for create_application."""

    @pytest.mark.asyncio
    async def test_create_defaults_to_applied(self, service, memory_repository):
        """Test a new application is stored with the applied status."""
        created = await service.create_application(
            "user_1",
            JobApplicationCreate(
                company_name="Initech",
                position_title="Data Engineer",
                application_date=date(2024, 2, 1),
            ),
        )
        assert created.status == ApplicationStatus.APPLIED
        assert created.user_id == "user_1"
        assert memory_repository.records[0].id == created.id

    @pytest.mark.asyncio
    async def test_create_with_rejection_forces_status(self, service):
        """Test the terminal-status rule applies on create."""
        created = await service.create_application(
            "user_1",
            JobApplicationCreate(
                company_name="Initech",
                position_title="Data Engineer",
                application_date=date(2024, 2, 1),
                rejection_date=date(2024, 2, 10),
                withdrawal_date=date(2024, 2, 11),
            ),
        )
        assert created.status == ApplicationStatus.REJECTED
        assert created.withdrawal_date is None

    @pytest.mark.asyncio
    async def test_create_offer_and_rejection_fails(self, service):
        """Test contradictory outcomes are refused."""
        with pytest.raises(ValueError, match="offer"):
            await service.create_application(
                "user_1",
                JobApplicationCreate(
                    company_name="Initech",
                    position_title="Data Engineer",
                    application_date=date(2024, 2, 1),
                    offer_received_date=date(2024, 2, 10),
                    rejection_date=date(2024, 2, 11),
                ),
            )


class TestUpdateApplication:
    """Tests for update_application."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, service):
        """Test only sent fields change."""
        updated = await service.update_application(
            "user_1", "a1", JobApplicationUpdate(notes="Phone screen next week")
        )
        assert updated.notes == "Phone screen next week"
        assert updated.company_name == "Acme"
        assert updated.status == ApplicationStatus.APPLIED

    @pytest.mark.asyncio
    async def test_withdrawal_clears_rejection(self, service):
        """Test withdrawing a rejected application swaps the terminal state."""
        updated = await service.update_application(
            "user_1", "a2", JobApplicationUpdate(withdrawal_date=date(2024, 1, 6))
        )
        assert updated.status == ApplicationStatus.WITHDRAWN
        assert updated.rejection_date is None
        assert updated.withdrawal_date == date(2024, 1, 6)

    @pytest.mark.asyncio
    async def test_null_required_field_ignored(self, service):
        """Test a null company name does not wipe the stored one."""
        updated = await service.update_application(
            "user_1", "a1", JobApplicationUpdate(company_name=None)
        )
        assert updated.company_name == "Acme"

    @pytest.mark.asyncio
    async def test_offer_on_rejected_record_fails(self, service):
        """Test the merged record is validated."""
        with pytest.raises(ValueError):
            await service.update_application(
                "user_1",
                "a2",
                JobApplicationUpdate(offer_received_date=date(2024, 1, 8)),
            )

    @pytest.mark.asyncio
    async def test_update_missing_record(self, service):
        with pytest.raises(ApplicationNotFoundError):
            await service.update_application(
                "user_1", "missing", JobApplicationUpdate(notes="x")
            )

    @pytest.mark.asyncio
    async def test_update_other_users_record(self, service):
        """Test records are scoped to their owner."""
        with pytest.raises(ApplicationNotFoundError):
            await service.update_application(
                "someone_else", "a1", JobApplicationUpdate(notes="x")
            )


class TestDeleteApplication:
    """Tests for delete_application."""

    @pytest.mark.asyncio
    async def test_delete(self, service, memory_repository):
        await service.delete_application("user_1", "a1")
        assert [r.id for r in memory_repository.records] == ["a2", "a3"]

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(ApplicationNotFoundError):
            await service.delete_application("user_1", "missing")


class TestIncomplete:
    """Tests for the missing-data workflow."""

    @pytest.mark.asyncio
    async def test_next_incomplete_reports_fields(self, service):
        """Test the next record comes with its missing fields."""
        result = await service.next_incomplete("user_1")
        assert result.item.id == "a1"
        assert result.remaining == 3
        assert result.missing_fields == ["area_of_work", "application_sent_date"]

    @pytest.mark.asyncio
    async def test_next_incomplete_excludes_current(self, service):
        """Test the record being edited is skipped."""
        result = await service.next_incomplete("user_1", exclude_id="a1")
        assert result.item.id == "a2"
        assert result.remaining == 2

    @pytest.mark.asyncio
    async def test_next_incomplete_single_fetch(self, service, memory_repository):
        """Test the record and the remaining count come from one fetch."""
        result = await service.next_incomplete("user_1", exclude_id="a2")

        assert memory_repository.fetch_count == 1
        assert result.item.id == "a1"
        assert result.remaining == 2

    @pytest.mark.asyncio
    async def test_nothing_left(self, empty_repository):
        """Test an empty result when nothing needs backfilling."""
        result = await ApplicationService(empty_repository).next_incomplete("user_1")
        assert result.item is None
        assert result.remaining == 0
        assert result.missing_fields == []


class TestAttachFile:
    """Tests for attach_file."""

    @pytest.mark.asyncio
    async def test_attach_cv(self, service, tmp_path):
        """Test a CV is stored and linked to the record."""
        storage = LocalFileStorage(tmp_path, "/files")
        updated = await service.attach_file(
            "user_1", "a1", "cv", "resume.pdf", b"%PDF-1.4", storage
        )

        assert updated.cv_file_name == "resume.pdf"
        assert updated.cv_file_url.startswith("/files/user_1/cv/")
        assert updated.cv_file_url.endswith(".pdf")
        stored = list((tmp_path / "user_1" / "cv").iterdir())
        assert len(stored) == 1
        assert stored[0].read_bytes() == b"%PDF-1.4"

    @pytest.mark.asyncio
    async def test_attach_cover_letter(self, service, tmp_path):
        storage = LocalFileStorage(tmp_path, "/files")
        updated = await service.attach_file(
            "user_1", "a1", "cover_letter", "letter.docx", b"hello", storage
        )
        assert updated.cover_letter_name == "letter.docx"
        assert "/cover-letters/" in updated.cover_letter_url

    @pytest.mark.asyncio
    async def test_empty_attachment_rejected(self, service, tmp_path):
        storage = LocalFileStorage(tmp_path, "/files")
        with pytest.raises(ValueError, match="empty"):
            await service.attach_file("user_1", "a1", "cv", "cv.pdf", b"", storage)

    @pytest.mark.asyncio
    async def test_unknown_record_not_stored(self, service, tmp_path):
        """Test nothing is written for a missing record."""
        storage = LocalFileStorage(tmp_path, "/files")
        with pytest.raises(ApplicationNotFoundError):
            await service.attach_file(
                "user_1", "missing", "cv", "cv.pdf", b"data", storage
            )
        assert list(tmp_path.iterdir()) == []


class TestSuggestions:
    """Tests for autocomplete suggestions."""

    @pytest.mark.asyncio
    async def test_defaults_then_user_values(
        self, application_factory, repository_factory
    ):
        """Test user values are appended to the defaults once."""
        repository = repository_factory(
            [
                application_factory(company_name="Initech", application_method="Referral"),
                application_factory(company_name="Google", application_method="Meetup"),
                application_factory(company_name="Initech"),
            ]
        )
        result = await ApplicationService(repository).suggestions("user_1")

        assert result.companies[: len(DEFAULT_COMPANIES)] == DEFAULT_COMPANIES
        assert result.companies[-1] == "Initech"
        assert result.companies.count("Google") == 1
        assert "Backend Engineer" in result.positions
        assert result.application_methods[-1] == "Meetup"
        assert result.application_methods.count("Referral") == 1
