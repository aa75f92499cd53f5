"""jobtrack - Personal job application tracker with timeline analytics."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from jobtrack.core.config import settings
from jobtrack.core.storage import init_models
from jobtrack.routers import analytics_router, applications_router

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    if settings.repository_backend == "sql":
        await init_models()
    os.makedirs(settings.attachments_dir, exist_ok=True)
    logger.info(f"Application initialized ({settings.repository_backend} backend)")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="jobtrack",
    description="Job application tracker with timeline and cohort analytics",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(applications_router)
app.include_router(analytics_router)

app.mount(
    settings.attachments_base_url,
    StaticFiles(directory=settings.attachments_dir, check_dir=False),
    name="files",
)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "message": "jobtrack API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
        "backend": settings.repository_backend,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "jobtrack"}
