"""
FastAPI application serving the Drive browser page.

This module wires dependencies and configures the application.
Behavior is in drive_browser/core, infrastructure in
drive_browser/infrastructure, HTML in drive_browser/presentation.

The app is single-user: one page state is shared by every browser, so
the search term, results and notices are whatever was submitted last.
"""

import logging
import os
from contextlib import asynccontextmanager
from functools import lru_cache

# Configure logging FIRST, before other local imports
from drive_browser.logging_config import setup_global_logging

setup_global_logging()

# Now import other modules (they will use the configured logging)
from fastapi import Depends, FastAPI, Request, status  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from drive_browser.api import files  # noqa: E402
from drive_browser.api.files import (  # noqa: E402
    get_storage_dependency,
    get_view_dependency,
)
from drive_browser.config import DriveConfig, get_drive_config  # noqa: E402
from drive_browser.core.exceptions import ConfigurationError  # noqa: E402
from drive_browser.infrastructure.drive_client import GoogleDriveClient  # noqa: E402
from drive_browser.presentation.view import HtmlResultsView  # noqa: E402

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Warns early when the access token is missing; requests that need
    Drive fail with a configuration error until it is set.
    """
    logger.info("Application starting up...")
    try:
        get_drive_config().validate()
    except ConfigurationError as e:
        logger.warning(f"Drive access is not configured: {e}")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="Drive Browser",
    description="Search, upload, rename and delete Google Drive files",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Dependency Injection Configuration (Wiring)
# ============================================================================


@lru_cache()
def get_results_view() -> HtmlResultsView:
    """
    Provide the page view.

    Uses lru_cache for singleton behavior - one page state for the app.
    """
    return HtmlResultsView()


def get_drive_client(
    config: DriveConfig = Depends(get_drive_config),
) -> GoogleDriveClient:
    """
    Provide the Drive client.

    Raises ConfigurationError when no access token is configured.
    """
    config.validate()
    return GoogleDriveClient(config)


# Override the dependencies in the router to use our wired instances
app.dependency_overrides[get_view_dependency] = get_results_view
app.dependency_overrides[get_storage_dependency] = get_drive_client


# ============================================================================
# Centralized Exception Handlers
# ============================================================================


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """
    Handle missing configuration.

    Returns 500 Internal Server Error; the operator has to set the
    environment and restart.
    """
    logger.error(f"Configuration error: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "error",
            "message": str(exc),
        },
    )


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(files.router)


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
