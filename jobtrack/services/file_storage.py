"""Attachment storage for CVs and cover letters."""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from jobtrack.core.config import settings
from jobtrack.core.exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Location of a stored attachment."""

    path: str
    public_url: str


class FileStorage(ABC):
    """Stores a blob and hands back a URL for it."""

    @abstractmethod
    async def store(
        self, user_id: str, folder: str, filename: str, content: bytes
    ) -> StoredFile:
        pass


def build_object_path(user_id: str, folder: str, filename: str) -> str:
    """``<user>/<folder>/<millis>.<ext>``, keeping the upload's extension."""
    suffix = PurePosixPath(filename).suffix
    stamp = int(time.time() * 1000)
    return f"{user_id}/{folder}/{stamp}{suffix}"


class LocalFileStorage(FileStorage):
    """Writes attachments below a directory served as static files."""

    def __init__(self, root: str | Path, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    async def store(
        self, user_id: str, folder: str, filename: str, content: bytes
    ) -> StoredFile:
        object_path = build_object_path(user_id, folder, filename)
        target = self.root / object_path
        try:
            await asyncio.to_thread(self._write, target, content)
        except OSError as e:
            logger.error(f"Failed to store attachment {object_path}: {e}")
            raise UpstreamFetchError("file storage", str(e))

        logger.info(f"Stored attachment {object_path} ({len(content)} bytes)")
        return StoredFile(
            path=object_path, public_url=f"{self.base_url}/{object_path}"
        )

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)


def get_file_storage() -> FileStorage:
    """FastAPI dependency for the configured attachment store."""
    return LocalFileStorage(settings.attachments_dir, settings.attachments_base_url)
