"""Path-confined filesystem core.

Public Interface:
    - FileSystemCore: Dispatches OperationRequests against one root
    - OperationRequest / OperationResult / OperationKind / OperationError
    - PathGuard: Root containment for relative paths
    - DirectoryService, FileService, TransferService, SearchEngine
    - classify: Extension to language tag
    - is_binary: First-chunk binary sniffing
    - ErrorKind and the FileSystemError hierarchy
"""

from .classifier import classify
from .directories import DirectoryService
from .errors import AccessDeniedError
from .errors import AlreadyExistsError
from .errors import ErrorKind
from .errors import FileSystemError
from .errors import InternalError
from .errors import InvalidArgumentError
from .errors import IsDirectoryError
from .errors import NotDirectoryError
from .errors import NotEmptyError
from .errors import NotFoundError
from .files import FileService
from .guard import PathGuard
from .operations import FileSystemCore
from .operations import OperationError
from .operations import OperationKind
from .operations import OperationRequest
from .operations import OperationResult
from .search import SearchEngine
from .sniffer import is_binary
from .transfer import TransferService

__all__ = [
    "AccessDeniedError",
    "AlreadyExistsError",
    "DirectoryService",
    "ErrorKind",
    "FileService",
    "FileSystemCore",
    "FileSystemError",
    "InternalError",
    "InvalidArgumentError",
    "IsDirectoryError",
    "NotDirectoryError",
    "NotEmptyError",
    "NotFoundError",
    "OperationError",
    "OperationKind",
    "OperationRequest",
    "OperationResult",
    "PathGuard",
    "SearchEngine",
    "TransferService",
    "classify",
    "is_binary",
]
