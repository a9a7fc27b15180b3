"""Operation dispatch for the filesystem core.

The transport layer decodes a request into an OperationRequest (operation
kind + parameter record) and gets back an OperationResult. Nothing raises
past FileSystemCore.execute: failures come back as a typed error.

Contract:
- Inputs: OperationRequest with camelCase parameter names
- Outputs: OperationResult (value on success, OperationError otherwise)
- Side Effects: Filesystem changes under the root only
"""

import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field

from filebridge_library.config.settings import BridgeSettings
from filebridge_library.models.base import CamelCaseModel

from .directories import DirectoryService
from .errors import ErrorKind
from .errors import FileSystemError
from .errors import InternalError
from .errors import InvalidArgumentError
from .files import FileService
from .guard import PathGuard
from .search import SearchEngine
from .sniffer import DEFAULT_SNIFF_BYTES
from .transfer import TransferService

logger = logging.getLogger(__name__)


class OperationKind(str, Enum):
    """Operations understood by the core."""

    LIST = "list"
    READ = "read"
    WRITE = "write"
    DELETE_FILE = "deleteFile"
    CREATE_DIRECTORY = "createDirectory"
    DELETE_DIRECTORY = "deleteDirectory"
    RENAME = "rename"
    COPY = "copy"
    MOVE = "move"
    SEARCH = "search"
    TREE = "tree"
    UPLOAD = "upload"


class OperationRequest(CamelCaseModel):
    """A decoded request: which operation, with which parameters."""

    kind: OperationKind
    params: dict[str, Any] = Field(default_factory=dict)


class OperationError(CamelCaseModel):
    """Why an operation failed."""

    kind: ErrorKind
    message: str
    path: str | None = None


class OperationResult(CamelCaseModel):
    """Discriminated result: success with a value, or failure with an error."""

    success: bool
    value: Any = None
    error: OperationError | None = None

    @classmethod
    def ok(cls, value: Any = None) -> "OperationResult":
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, exc: FileSystemError) -> "OperationResult":
        return cls(
            success=False,
            error=OperationError(kind=exc.kind, message=exc.message, path=exc.path),
        )


def _require(params: dict[str, Any], name: str) -> Any:
    value = params.get(name)
    if value is None or value == "":
        raise InvalidArgumentError(f"Missing required parameter: {name}")
    return value


_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no", ""})


def _flag(params: dict[str, Any], name: str, default: bool) -> bool:
    """Read a boolean parameter; "true"/"false" strings are accepted."""
    value = params.get(name)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidArgumentError(f"Parameter {name} must be a boolean, got {value!r}")


def _tags(params: dict[str, Any], name: str) -> list[str] | None:
    """Read a language tag filter: a list of tags or a comma-separated string."""
    value = params.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, list | tuple | set | frozenset) and all(isinstance(tag, str) for tag in value):
        return list(value)
    raise InvalidArgumentError(f"Parameter {name} must be a list of language tags, got {value!r}")


class FileSystemCore:
    """Entry point tying the guard and services to one root.

    Example:
        >>> core = FileSystemCore(Path("/srv/files"))
        >>> result = await core.execute(OperationRequest(kind=OperationKind.LIST))
        >>> result.success
        True
    """

    def __init__(
        self,
        root: Path,
        sniff_bytes: int = DEFAULT_SNIFF_BYTES,
        search_max_results: int = 100,
        search_max_matches_per_file: int = 10,
        search_max_file_bytes: int = 10 * 1024 * 1024,
        tree_default_depth: int = 3,
    ) -> None:
        self.guard = PathGuard(root)
        self.directories = DirectoryService(self.guard)
        self.files = FileService(self.guard, sniff_bytes=sniff_bytes)
        self.transfer = TransferService(self.guard)
        self.search_engine = SearchEngine(
            self.guard,
            max_results=search_max_results,
            max_matches_per_file=search_max_matches_per_file,
            max_file_bytes=search_max_file_bytes,
        )
        self.tree_default_depth = tree_default_depth

        self._handlers: dict[OperationKind, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            OperationKind.LIST: self._list,
            OperationKind.READ: self._read,
            OperationKind.WRITE: self._write,
            OperationKind.DELETE_FILE: self._delete_file,
            OperationKind.CREATE_DIRECTORY: self._create_directory,
            OperationKind.DELETE_DIRECTORY: self._delete_directory,
            OperationKind.RENAME: self._rename,
            OperationKind.COPY: self._copy,
            OperationKind.MOVE: self._move,
            OperationKind.SEARCH: self._search,
            OperationKind.TREE: self._tree,
            OperationKind.UPLOAD: self._upload,
        }

    @classmethod
    def from_settings(cls, settings: BridgeSettings) -> "FileSystemCore":
        return cls(
            Path(settings.root_path),
            sniff_bytes=settings.sniff_bytes,
            search_max_results=settings.search_max_results,
            search_max_matches_per_file=settings.search_max_matches_per_file,
            search_max_file_bytes=settings.search_max_file_bytes,
            tree_default_depth=settings.tree_default_depth,
        )

    @property
    def root(self) -> Path:
        return self.guard.root

    async def execute(self, request: OperationRequest) -> OperationResult:
        """Run one operation and report its outcome.

        Never raises: expected failures map to their error kind, anything
        unexpected becomes an internal error (logged with traceback).
        """
        handler = self._handlers[request.kind]
        try:
            value = await handler(request.params)
        except FileSystemError as e:
            logger.info(f"{request.kind.value} failed: {e.kind.value}: {e.message}")
            return OperationResult.failure(e)
        except Exception as e:
            logger.exception(f"Unexpected error during {request.kind.value}")
            error = InternalError(f"Unexpected error during {request.kind.value}: {e}")
            error.__cause__ = e
            return OperationResult.failure(error)

        return OperationResult.ok(value)

    async def _list(self, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(self.directories.list_directory, params.get("relativePath"))

    async def _read(self, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(self.files.read, _require(params, "relativePath"))

    async def _write(self, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(
            self.files.write,
            _require(params, "relativePath"),
            params.get("content"),
            _flag(params, "createDirectories", False),
        )

    async def _delete_file(self, params: dict[str, Any]) -> None:
        await asyncio.to_thread(self.files.delete, _require(params, "relativePath"))

    async def _create_directory(self, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(
            self.directories.create_directory,
            _require(params, "relativePath"),
            _flag(params, "recursive", True),
        )

    async def _delete_directory(self, params: dict[str, Any]) -> None:
        await asyncio.to_thread(
            self.directories.delete_directory,
            _require(params, "relativePath"),
            _flag(params, "recursive", False),
        )

    async def _rename(self, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(
            self.transfer.rename,
            _require(params, "oldRelativePath"),
            _require(params, "newName"),
        )

    async def _copy(self, params: dict[str, Any]) -> None:
        await self.transfer.copy(
            _require(params, "sourceRelativePath"),
            _require(params, "destinationRelativePath"),
        )

    async def _move(self, params: dict[str, Any]) -> None:
        await asyncio.to_thread(
            self.transfer.move,
            _require(params, "sourceRelativePath"),
            _require(params, "destinationRelativePath"),
        )

    async def _search(self, params: dict[str, Any]) -> Any:
        return await self.search_engine.search(
            _require(params, "query"),
            params.get("searchRelativePath"),
            _tags(params, "fileTypeFilter"),
            _flag(params, "caseSensitive", False),
        )

    async def _tree(self, params: dict[str, Any]) -> Any:
        max_depth = params.get("maxDepth")
        if max_depth is None:
            max_depth = self.tree_default_depth
        try:
            max_depth = int(max_depth)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"maxDepth must be an integer, got {max_depth!r}") from e
        return await self.directories.build_tree(params.get("relativePath"), max_depth)

    async def _upload(self, params: dict[str, Any]) -> Any:
        data = params.get("data")
        if not isinstance(data, bytes | bytearray):
            raise InvalidArgumentError("Missing required parameter: data")
        return await asyncio.to_thread(
            self.files.save_upload,
            params.get("relativePath"),
            _require(params, "fileName"),
            bytes(data),
        )
