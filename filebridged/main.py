"""Main FastAPI application for filebridged daemon.

This module creates and configures the FastAPI application that exposes
the filebridge_library filesystem core via REST API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .dependencies import get_core
from .dependencies import get_settings
from .routers import browse_router
from .routers import directories_router
from .routers import files_router
from .routers import search_router
from .routers import status_router
from .routers import transfer_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    logger.info(f"Starting filebridged on {settings.host}:{settings.port}")
    logger.info(f"Serving root: {get_core().root}")

    yield

    logger.info("Shutting down filebridged")


# Create FastAPI application
app = FastAPI(
    title="filebridged",
    description="REST API exposing a root-confined filesystem to remote clients",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware - origins configured in config.yaml
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info(f"CORS enabled for origins: {settings.cors_origins}")

# Include routers
app.include_router(browse_router)
app.include_router(files_router)
app.include_router(directories_router)
app.include_router(transfer_router)
app.include_router(search_router)
app.include_router(status_router)


@app.get("/")
async def root() -> dict[str, str | list[str]]:
    """Root endpoint.

    Returns:
        Service name, version and the available endpoints
    """
    return {
        "name": "filebridged",
        "version": __version__,
        "description": "File browser API for mobile clients",
        "docs": "/docs",
        "endpoints": [
            "GET /api/v1/browse?path= - Browse directories",
            "GET /api/v1/tree?path=&depth= - Get directory tree",
            "GET /api/v1/file?path= - Read file content",
            "POST /api/v1/file - Create or update file",
            "DELETE /api/v1/file?path= - Delete file",
            "GET /api/v1/file/download?path= - Download file",
            "POST /api/v1/upload - Upload files",
            "POST /api/v1/directory - Create directory",
            "DELETE /api/v1/directory?path=&recursive= - Delete directory",
            "POST /api/v1/rename - Rename file or directory",
            "POST /api/v1/copy - Copy file or directory",
            "POST /api/v1/move - Move file or directory",
            "GET /api/v1/search?q=&path=&types=&case= - Search files",
            "GET /api/v1/status - Daemon status",
        ],
    }
