"""Response models for filebridged API.

Operation payloads (listings, file records, search results, trees) are the
library models; these cover acknowledgements and daemon status.
"""

from pydantic import Field

from filebridge_library.models.base import CamelCaseModel
from filebridge_library.models.files import UploadedFile


class OperationAck(CamelCaseModel):
    """Acknowledgement for operations without a payload."""

    message: str = Field(..., description="What happened")
    path: str | None = Field(default=None, description="Affected path relative to the root")


class RenameResponse(CamelCaseModel):
    """Response after a rename."""

    message: str
    old_path: str
    new_path: str


class TransferResponse(CamelCaseModel):
    """Response after a copy or move."""

    message: str
    source_path: str
    destination_path: str


class UploadResponse(CamelCaseModel):
    """Response after an upload."""

    message: str
    files: list[UploadedFile] = Field(default_factory=list)


class StatusResponse(CamelCaseModel):
    """Daemon status.

    Attributes:
        status: Daemon status (running)
        version: Daemon version
        uptime_seconds: Seconds since the daemon started
        root_dir: Directory every request is confined to
    """

    status: str = Field(..., description="Daemon status")
    version: str = Field(..., description="Daemon version")
    uptime_seconds: float = Field(..., description="Uptime in seconds")
    root_dir: str = Field(..., description="Root directory")
