"""Application configuration management."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./jobtrack.db"
    repository_backend: Literal["sql", "supabase"] = "sql"

    # Supabase (PostgREST) backend
    supabase_url: str | None = None
    supabase_key: str | None = None
    supabase_table: str = "job_applications"
    supabase_timeout: float = Field(default=15.0, gt=0)

    # Auth
    default_user_id: str | None = Field(
        default="single_user",
        description="User id used when no X-User-Id header is sent",
    )

    # Attachments
    attachments_dir: str = "uploads"
    attachments_base_url: str = "/files"
    max_attachment_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    # Analytics
    area_chart_limit: int = Field(default=8, ge=1, le=50)

    cors_origins: list[str] = ["*"]

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
