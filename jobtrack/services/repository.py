"""Persistence interface for job application records."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobtrack.core.exceptions import ApplicationNotFoundError, UpstreamFetchError
from jobtrack.core.storage import async_session
from jobtrack.models.application import JobApplicationRecord
from jobtrack.schemas.application import JobApplication
from jobtrack.services.analytics.missing_data import find_incomplete

logger = logging.getLogger(__name__)


class ApplicationRepository(ABC):
    """Abstract store of one user's job applications.

    Implementations filter every call by ``user_id`` and raise
    ``UpstreamFetchError`` when the backend fails.
    """

    @abstractmethod
    async def fetch_all(self, user_id: str) -> list[JobApplication]:
        """Return every record of the user, most recently created first."""
        pass

    @abstractmethod
    async def get(self, user_id: str, application_id: str) -> JobApplication:
        """Return one record.

        Raises:
            ApplicationNotFoundError: if the user has no such record.
        """
        pass

    @abstractmethod
    async def create(self, user_id: str, values: dict[str, Any]) -> JobApplication:
        pass

    @abstractmethod
    async def update(
        self, user_id: str, application_id: str, values: dict[str, Any]
    ) -> JobApplication:
        pass

    @abstractmethod
    async def delete(self, user_id: str, application_id: str) -> None:
        pass

    async def fetch_missing_data_candidates(
        self, user_id: str, exclude_id: str | None = None
    ) -> list[JobApplication]:
        """Records still missing data, in fetch order."""
        records = await self.fetch_all(user_id)
        return find_incomplete(records, exclude_id)


def to_column_values(values: dict[str, Any]) -> dict[str, Any]:
    """Unwrap enum members so drivers receive plain strings."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
    }


class SQLApplicationRepository(ApplicationRepository):
    """Repository backed by the SQLAlchemy ``job_applications`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = async_session):
        self.session_factory = session_factory

    async def fetch_all(self, user_id: str) -> list[JobApplication]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(JobApplicationRecord)
                    .where(JobApplicationRecord.user_id == user_id)
                    .order_by(JobApplicationRecord.created_at.desc())
                )
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch applications for user {user_id}: {e}")
            raise UpstreamFetchError("database", str(e))

        return [JobApplication.model_validate(row) for row in rows]

    async def get(self, user_id: str, application_id: str) -> JobApplication:
        try:
            async with self.session_factory() as session:
                row = await self._get_row(session, user_id, application_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load application {application_id}: {e}")
            raise UpstreamFetchError("database", str(e))

        return JobApplication.model_validate(row)

    async def create(self, user_id: str, values: dict[str, Any]) -> JobApplication:
        try:
            async with self.session_factory() as session:
                row = JobApplicationRecord(user_id=user_id, **to_column_values(values))
                session.add(row)
                await session.commit()
                await session.refresh(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create application for user {user_id}: {e}")
            raise UpstreamFetchError("database", str(e))

        logger.info(f"Created application {row.id} ({row.company_name})")
        return JobApplication.model_validate(row)

    async def update(
        self, user_id: str, application_id: str, values: dict[str, Any]
    ) -> JobApplication:
        try:
            async with self.session_factory() as session:
                row = await self._get_row(session, user_id, application_id)
                for key, value in to_column_values(values).items():
                    setattr(row, key, value)
                await session.commit()
                await session.refresh(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update application {application_id}: {e}")
            raise UpstreamFetchError("database", str(e))

        return JobApplication.model_validate(row)

    async def delete(self, user_id: str, application_id: str) -> None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    delete(JobApplicationRecord).where(
                        JobApplicationRecord.id == application_id,
                        JobApplicationRecord.user_id == user_id,
                    )
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete application {application_id}: {e}")
            raise UpstreamFetchError("database", str(e))

        if result.rowcount == 0:
            raise ApplicationNotFoundError(application_id)
        logger.info(f"Deleted application {application_id}")

    @staticmethod
    async def _get_row(
        session: AsyncSession, user_id: str, application_id: str
    ) -> JobApplicationRecord:
        result = await session.execute(
            select(JobApplicationRecord).where(
                JobApplicationRecord.id == application_id,
                JobApplicationRecord.user_id == user_id,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise ApplicationNotFoundError(application_id)
        return row
