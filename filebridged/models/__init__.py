"""API models for filebridged daemon.

This module defines request and response models for the REST API.
"""

from .errors import ErrorResponse
from .requests import CreateDirectoryRequest
from .requests import RenameRequest
from .requests import TransferRequest
from .requests import WriteFileRequest
from .responses import OperationAck
from .responses import RenameResponse
from .responses import StatusResponse
from .responses import TransferResponse
from .responses import UploadResponse

__all__ = [
    "CreateDirectoryRequest",
    "ErrorResponse",
    "OperationAck",
    "RenameRequest",
    "RenameResponse",
    "StatusResponse",
    "TransferRequest",
    "TransferResponse",
    "UploadResponse",
    "WriteFileRequest",
]
