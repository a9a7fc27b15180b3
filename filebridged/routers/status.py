"""Status router for filebridged API.

Provides health check and status information.
"""

import time

from fastapi import APIRouter
from fastapi import Depends

from filebridge_library.fs import FileSystemCore

from .. import __version__
from ..dependencies import get_core
from ..models import StatusResponse

router = APIRouter(prefix="/api/v1", tags=["status"])

# Track daemon start time for uptime calculation
_start_time = time.time()


@router.get("/status", response_model=StatusResponse)
async def get_status(core: FileSystemCore = Depends(get_core)) -> StatusResponse:
    """Get daemon status.

    Returns:
        Daemon status information including version, uptime, and root directory
    """
    return StatusResponse(
        status="running",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        root_dir=str(core.root),
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Simple health status
    """
    return {"status": "healthy"}
