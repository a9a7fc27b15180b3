"""API routers for filebridged daemon.

This module contains FastAPI routers for all API endpoints.
"""

from .browse import router as browse_router
from .directories import router as directories_router
from .files import router as files_router
from .search import router as search_router
from .status import router as status_router
from .transfer import router as transfer_router

__all__ = [
    "browse_router",
    "directories_router",
    "files_router",
    "search_router",
    "status_router",
    "transfer_router",
]
