"""Error taxonomy for filesystem operations.

Services raise these exceptions internally; the operation boundary
(FileSystemCore.execute) turns them into failed OperationResults so nothing
propagates past it.
"""

import errno
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure an operation can report."""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    ALREADY_EXISTS = "already_exists"
    NOT_EMPTY = "not_empty"
    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL = "internal"


class FileSystemError(Exception):
    """Base error for filesystem operations.

    Attributes:
        kind: Error kind reported to callers
        message: Human readable description
        path: Root-relative path the error refers to, if any
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class AccessDeniedError(FileSystemError):
    kind = ErrorKind.ACCESS_DENIED


class NotFoundError(FileSystemError):
    kind = ErrorKind.NOT_FOUND


class NotDirectoryError(FileSystemError):
    kind = ErrorKind.NOT_A_DIRECTORY


class IsDirectoryError(FileSystemError):
    kind = ErrorKind.IS_A_DIRECTORY


class AlreadyExistsError(FileSystemError):
    kind = ErrorKind.ALREADY_EXISTS


class NotEmptyError(FileSystemError):
    kind = ErrorKind.NOT_EMPTY


class InvalidArgumentError(FileSystemError):
    kind = ErrorKind.INVALID_ARGUMENT


class InternalError(FileSystemError):
    """Unexpected failure; the original exception is kept as __cause__."""

    kind = ErrorKind.INTERNAL


def translate_os_error(exc: OSError, path: str | None = None) -> FileSystemError:
    """Map an OSError raised by the filesystem to the error taxonomy.

    Args:
        exc: Error raised by an os/pathlib/shutil call
        path: Root-relative path to report

    Returns:
        FileSystemError of the matching kind (caller raises it ``from exc``)
    """
    label = path if path else "/"
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(f"Path not found: {label}", path)
    if isinstance(exc, FileExistsError):
        return AlreadyExistsError(f"Path already exists: {label}", path)
    if isinstance(exc, IsADirectoryError):
        return IsDirectoryError(f"Path is a directory: {label}", path)
    if isinstance(exc, NotADirectoryError):
        return NotDirectoryError(f"Path is not a directory: {label}", path)
    if isinstance(exc, PermissionError):
        return AccessDeniedError(f"Permission denied by host filesystem: {label}", path)
    if exc.errno == errno.ENOTEMPTY:
        return NotEmptyError(f"Directory not empty: {label}", path)
    return InternalError(f"Filesystem error on {label}: {exc.strerror or exc}", path)
