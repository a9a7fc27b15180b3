"""Shared dependency factories for FastAPI endpoints.

These factories provide dependency injection for the settings and the
filesystem core, and translate failed operation results into HTTP errors.
"""

from functools import lru_cache
from typing import Any

from fastapi import HTTPException

from filebridge_library.config.loader import load_config
from filebridge_library.config.settings import BridgeSettings
from filebridge_library.fs import ErrorKind
from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import FileSystemError
from filebridge_library.fs import OperationError
from filebridge_library.fs import OperationResult

from .models.errors import ErrorResponse

STATUS_BY_ERROR_KIND: dict[ErrorKind, int] = {
    ErrorKind.ACCESS_DENIED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NOT_A_DIRECTORY: 400,
    ErrorKind.IS_A_DIRECTORY: 400,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.NOT_EMPTY: 409,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.INTERNAL: 500,
}


@lru_cache(maxsize=1)
def get_settings() -> BridgeSettings:
    """Get daemon settings singleton instance."""
    return load_config()


@lru_cache(maxsize=1)
def get_core() -> FileSystemCore:
    """Get filesystem core singleton instance, rooted at the configured root_path."""
    return FileSystemCore.from_settings(get_settings())


def http_error(error: OperationError | FileSystemError) -> HTTPException:
    """Build the HTTPException for a failed operation.

    Returns:
        HTTPException whose detail is an ErrorResponse body
    """
    body = ErrorResponse(error=error.kind.value, detail=error.message, path=error.path)
    return HTTPException(status_code=STATUS_BY_ERROR_KIND[error.kind], detail=body.model_dump())


def unwrap(result: OperationResult) -> Any:
    """Return the value of a successful result, raise HTTPException otherwise."""
    if result.success or result.error is None:
        return result.value
    raise http_error(result.error)
