"""Single-file read, write, delete and upload."""

import logging
from pathlib import Path
from pathlib import PurePosixPath

from filebridge_library.models.files import FileRecord
from filebridge_library.models.files import UploadedFile
from filebridge_library.models.files import WriteResult

from .classifier import classify
from .directories import modified_time
from .errors import InvalidArgumentError
from .errors import IsDirectoryError
from .errors import NotDirectoryError
from .errors import NotFoundError
from .errors import translate_os_error
from .guard import PathGuard
from .sniffer import DEFAULT_SNIFF_BYTES
from .sniffer import is_binary

logger = logging.getLogger(__name__)


class FileService:
    """File operations confined to the guard's root.

    Writes are last-write-wins: there is no concurrency check between
    clients editing the same file.
    """

    def __init__(self, guard: PathGuard, sniff_bytes: int = DEFAULT_SNIFF_BYTES) -> None:
        self.guard = guard
        self.sniff_bytes = sniff_bytes

    def _resolve_required(self, relative_path: str | None) -> Path:
        if not relative_path:
            raise InvalidArgumentError("File path is required")
        return self.guard.resolve(relative_path)

    def locate(self, relative_path: str | None) -> Path:
        """Resolve a path that must name an existing regular file.

        Raises:
            AccessDeniedError: Path escapes root
            NotFoundError: Path doesn't exist
            IsDirectoryError: Path is a directory
            InvalidArgumentError: Path is a FIFO, socket or device
        """
        file_path = self._resolve_required(relative_path)
        label = self.guard.relative(file_path)

        if not file_path.exists():
            raise NotFoundError(f"Path not found: {label}", label)
        if file_path.is_dir():
            raise IsDirectoryError(f"Path is a directory: {label}", label)
        if not file_path.is_file():
            raise InvalidArgumentError(f"Not a regular file: {label}", label)

        return file_path

    def read(self, relative_path: str | None) -> FileRecord:
        """Read a file.

        Binary files (per the content sniffer) come back with content None.
        Text is decoded from UTF-8 as-is, without newline translation;
        undecodable bytes become U+FFFD.
        """
        file_path = self.locate(relative_path)
        label = self.guard.relative(file_path)

        try:
            stat_result = file_path.stat()
            binary = is_binary(file_path, self.sniff_bytes)
            content = None if binary else file_path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            raise translate_os_error(e, label) from e

        return FileRecord(
            relative_path=label,
            name=file_path.name,
            language_tag=classify(file_path.name),
            size_bytes=stat_result.st_size,
            modified_at=modified_time(stat_result),
            is_binary=binary,
            content=content,
        )

    def write(self, relative_path: str | None, content: str | None, create_directories: bool = False) -> WriteResult:
        """Create or overwrite a text file.

        Args:
            relative_path: File to write
            content: Text to store as UTF-8 (None stores an empty file)
            create_directories: Create missing parent directories

        Returns:
            WriteResult with size and modification time after the write

        Raises:
            AccessDeniedError: Path escapes root (checked before any disk access)
            NotFoundError: Parent directory missing and create_directories is False
            IsDirectoryError: Path is an existing directory
        """
        file_path = self._resolve_required(relative_path)
        label = self.guard.relative(file_path)

        if file_path.is_dir():
            raise IsDirectoryError(f"Path is a directory: {label}", label)
        if file_path.exists() and not file_path.is_file():
            raise InvalidArgumentError(f"Not a regular file: {label}", label)

        try:
            if create_directories:
                file_path.parent.mkdir(parents=True, exist_ok=True)
            elif not file_path.parent.is_dir():
                parent = self.guard.relative(file_path.parent)
                raise NotFoundError(f"Parent directory not found: {parent}", parent)

            file_path.write_bytes((content or "").encode("utf-8"))
            stat_result = file_path.stat()
        except OSError as e:
            raise translate_os_error(e, label) from e

        logger.info(f"Saved file: {label} ({stat_result.st_size} bytes)")

        return WriteResult(
            relative_path=label,
            size_bytes=stat_result.st_size,
            modified_at=modified_time(stat_result),
        )

    def delete(self, relative_path: str | None) -> None:
        """Delete a single file (or symlink). Directories are refused."""
        file_path = self._resolve_required(relative_path)
        label = self.guard.relative(file_path)

        if not file_path.exists() and not file_path.is_symlink():
            raise NotFoundError(f"Path not found: {label}", label)
        if file_path.is_dir() and not file_path.is_symlink():
            raise IsDirectoryError(f"Path is a directory: {label}", label)

        try:
            file_path.unlink()
        except OSError as e:
            raise translate_os_error(e, label) from e

        logger.info(f"Deleted file: {label}")

    def save_upload(self, directory: str | None, file_name: str | None, data: bytes) -> UploadedFile:
        """Store uploaded bytes in an existing directory.

        Only the final segment of file_name is used, so a client cannot
        steer the upload into another directory through the file name.

        Args:
            directory: Target directory relative to root ("" for root)
            file_name: Name sent by the client
            data: File content

        Returns:
            UploadedFile describing the stored file
        """
        name = PurePosixPath((file_name or "").replace("\\", "/")).name
        if not name or name in (".", ".."):
            raise InvalidArgumentError(f"Invalid upload file name: {file_name!r}")

        dir_path = self.guard.resolve(directory)
        dir_label = self.guard.relative(dir_path)
        if not dir_path.exists():
            raise NotFoundError(f"Path not found: {dir_label}", dir_label)
        if not dir_path.is_dir():
            raise NotDirectoryError(f"Path is not a directory: {dir_label}", dir_label)

        target_relative = f"{dir_label}/{name}" if dir_label else name
        target = self.guard.resolve(target_relative)
        label = self.guard.relative(target)

        if target.is_dir():
            raise IsDirectoryError(f"Path is a directory: {label}", label)
        if target.exists() and not target.is_file():
            raise InvalidArgumentError(f"Not a regular file: {label}", label)

        try:
            target.write_bytes(data)
        except OSError as e:
            raise translate_os_error(e, label) from e

        logger.info(f"Uploaded file: {label} ({len(data)} bytes)")

        return UploadedFile(
            original_name=file_name or name,
            file_name=name,
            size_bytes=len(data),
            relative_path=label,
        )
