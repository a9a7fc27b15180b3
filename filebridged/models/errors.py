"""Error models for filebridged API.

Pydantic models for error responses.
"""

from pydantic import Field

from filebridge_library.models.base import CamelCaseModel


class ErrorResponse(CamelCaseModel):
    """Standard error body, sent as the HTTPException detail.

    Attributes:
        error: Error kind (access_denied, not_found, ...)
        detail: Human readable message
        path: Root-relative path the error refers to, if any
    """

    error: str = Field(..., description="Error kind")
    detail: str = Field(..., description="Error message")
    path: str | None = Field(default=None, description="Path the error refers to")
