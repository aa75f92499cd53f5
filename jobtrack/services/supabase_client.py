"""Supabase (PostgREST) backed repository."""

import asyncio
import logging
import random
from datetime import date, datetime
from typing import Any

import httpx

from jobtrack.core.config import settings
from jobtrack.core.exceptions import ApplicationNotFoundError, UpstreamFetchError
from jobtrack.schemas.application import JobApplication
from jobtrack.services.repository import ApplicationRepository, to_column_values

logger = logging.getLogger(__name__)

# Column names that differ between the Python schema and the table.
COLUMN_NAMES = {"status": "application_status"}


def to_payload(values: dict[str, Any]) -> dict[str, Any]:
    """Convert schema values into a JSON body for PostgREST."""
    payload = {}
    for key, value in to_column_values(values).items():
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        payload[COLUMN_NAMES.get(key, key)] = value
    return payload


class SupabaseApplicationRepository(ApplicationRepository):
    """Talks to the ``job_applications`` table through the PostgREST API."""

    RETRY_STATUSES = (502, 503, 504)

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "job_applications",
        timeout: float = 15.0,
        max_retries: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.table = table
        self.max_retries = max_retries
        self.client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            timeout=httpx.Timeout(timeout),
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
                "Prefer": "return=representation",
            },
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        params: dict[str, str],
        json: dict[str, Any] | None = None,
        base_delay: float = 0.5,
    ) -> list[dict[str, Any]]:
        """Send one request, retrying gateway and connection failures."""
        retries = 0
        while True:
            try:
                response = await self.client.request(
                    method, f"/{self.table}", params=params, json=json
                )
                if (
                    response.status_code in self.RETRY_STATUSES
                    and retries < self.max_retries
                ):
                    retries += 1
                    delay = base_delay * (2**retries) + random.uniform(0, 0.5)
                    logger.warning(
                        f"Supabase gateway error {response.status_code}. "
                        f"Retry {retries}/{self.max_retries} after {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)
                    continue

                response.raise_for_status()
                if not response.content:
                    return []
                return response.json()

            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Supabase error {e.response.status_code} for {method} "
                    f"{self.table}: {e.response.text[:500]}"
                )
                raise UpstreamFetchError(
                    "supabase", f"HTTP {e.response.status_code}: {e.response.text[:200]}"
                )
            except (httpx.ConnectError, httpx.ReadTimeout, httpx.PoolTimeout) as e:
                retries += 1
                if retries > self.max_retries:
                    logger.error(f"Supabase unreachable after {self.max_retries} retries: {e!s}")
                    raise UpstreamFetchError("supabase", f"Network error: {e!s}")

                delay = base_delay * (2**retries) + random.uniform(0, 0.5)
                logger.warning(
                    f"Network error. Retry {retries}/{self.max_retries} after {delay:.2f}s"
                )
                await asyncio.sleep(delay)
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Supabase request failed for {method} {self.table}: {e!s}")
                raise UpstreamFetchError("supabase", str(e))

    @staticmethod
    def _row_filter(user_id: str, application_id: str) -> dict[str, str]:
        return {"id": f"eq.{application_id}", "user_id": f"eq.{user_id}"}

    async def fetch_all(self, user_id: str) -> list[JobApplication]:
        rows = await self._request(
            "GET",
            params={
                "select": "*",
                "user_id": f"eq.{user_id}",
                "order": "created_at.desc",
            },
        )
        return [JobApplication.model_validate(row) for row in rows]

    async def get(self, user_id: str, application_id: str) -> JobApplication:
        rows = await self._request(
            "GET", params={"select": "*", **self._row_filter(user_id, application_id)}
        )
        if not rows:
            raise ApplicationNotFoundError(application_id)
        return JobApplication.model_validate(rows[0])

    async def create(self, user_id: str, values: dict[str, Any]) -> JobApplication:
        rows = await self._request(
            "POST", params={}, json={**to_payload(values), "user_id": user_id}
        )
        if not rows:
            raise UpstreamFetchError("supabase", "Insert returned no row")
        logger.info(f"Created application {rows[0].get('id')} in Supabase")
        return JobApplication.model_validate(rows[0])

    async def update(
        self, user_id: str, application_id: str, values: dict[str, Any]
    ) -> JobApplication:
        rows = await self._request(
            "PATCH",
            params=self._row_filter(user_id, application_id),
            json=to_payload(values),
        )
        if not rows:
            raise ApplicationNotFoundError(application_id)
        return JobApplication.model_validate(rows[0])

    async def delete(self, user_id: str, application_id: str) -> None:
        rows = await self._request(
            "DELETE", params=self._row_filter(user_id, application_id)
        )
        if not rows:
            raise ApplicationNotFoundError(application_id)
        logger.info(f"Deleted application {application_id} from Supabase")


def create_supabase_repository() -> SupabaseApplicationRepository:
    """Build the repository from settings."""
    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set for the supabase backend")
    return SupabaseApplicationRepository(
        base_url=settings.supabase_url,
        api_key=settings.supabase_key,
        table=settings.supabase_table,
        timeout=settings.supabase_timeout,
    )
