"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from profilehub.api.router import api_router
from profilehub.core.config import settings
from profilehub.core.exceptions import register_exception_handlers
from profilehub.core.logging import configure_logging
from profilehub.core.middleware import setup_middleware

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: make sure the users table exists."""
    logger.info("Starting profilehub", env=settings.ENVIRONMENT, port=settings.PORT)
    if settings.AUTO_CREATE_TABLES:
        from profilehub.db.init_db import init_db
        init_db()
    yield
    logger.info("profilehub stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="User accounts and profile documents.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

setup_middleware(app)
register_exception_handlers(app)

# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "profilehub",
        "version": settings.VERSION
    }
