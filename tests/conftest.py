"""Pytest configuration and fixtures."""

import os
import sys
import uuid
from datetime import UTC, date, datetime
from typing import Any

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing jobtrack modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ["REPOSITORY_BACKEND"] = "sql"
os.environ["DEFAULT_USER_ID"] = "user_1"

from jobtrack.core.exceptions import ApplicationNotFoundError  # noqa: E402
from jobtrack.schemas.application import JobApplication  # noqa: E402
from jobtrack.services.repository import ApplicationRepository  # noqa: E402


def make_application(**overrides: Any) -> JobApplication:
    """Build a JobApplication with sensible defaults."""
    values: dict[str, Any] = {
        "id": str(uuid.uuid4()),
        "user_id": "user_1",
        "company_name": "Acme",
        "position_title": "Backend Engineer",
        "application_date": date(2024, 1, 1),
        "status": "applied",
    }
    values.update(overrides)
    return JobApplication(**values)


class InMemoryApplicationRepository(ApplicationRepository):
    """Repository keeping records in a list, newest first."""

    def __init__(self, records: list[JobApplication] | None = None):
        self.records: list[JobApplication] = list(records or [])
        self.fetch_count = 0

    async def fetch_all(self, user_id: str) -> list[JobApplication]:
        self.fetch_count += 1
        return [r for r in self.records if r.user_id == user_id]

    async def get(self, user_id: str, application_id: str) -> JobApplication:
        for record in self.records:
            if record.id == application_id and record.user_id == user_id:
                return record
        raise ApplicationNotFoundError(application_id)

    async def create(self, user_id: str, values: dict[str, Any]) -> JobApplication:
        now = datetime.now(UTC).replace(tzinfo=None)
        record = JobApplication(
            **values,
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self.records.insert(0, record)
        return record

    async def update(
        self, user_id: str, application_id: str, values: dict[str, Any]
    ) -> JobApplication:
        current = await self.get(user_id, application_id)
        updated = current.model_copy(update=values)
        self.records[self.records.index(current)] = updated
        return updated

    async def delete(self, user_id: str, application_id: str) -> None:
        current = await self.get(user_id, application_id)
        self.records.remove(current)


@pytest.fixture
def application_factory():
    """Factory for JobApplication records."""
    return make_application


@pytest.fixture
def scenario_records():
    """Three applications over the first days of 2024."""
    return [
        make_application(
            id="a1", application_date=date(2024, 1, 1), status="applied"
        ),
        make_application(
            id="a2",
            application_date=date(2024, 1, 1),
            status="rejected",
            rejection_date=date(2024, 1, 5),
        ),
        make_application(
            id="a3", application_date=date(2024, 1, 3), status="interview"
        ),
    ]


@pytest.fixture
def memory_repository(scenario_records):
    """In-memory repository seeded with the scenario records."""
    return InMemoryApplicationRepository(scenario_records)


@pytest.fixture
def empty_repository():
    return InMemoryApplicationRepository()


@pytest.fixture
def repository_factory():
    """Build an in-memory repository from a list of records."""
    return InMemoryApplicationRepository
