"""File read/write/delete, download and upload endpoints."""

import asyncio
import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import File
from fastapi import Form
from fastapi import Query
from fastapi import UploadFile
from fastapi.responses import FileResponse

from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import FileSystemError
from filebridge_library.fs import OperationKind
from filebridge_library.fs import OperationRequest
from filebridge_library.models.files import FileRecord
from filebridge_library.models.files import UploadedFile
from filebridge_library.models.files import WriteResult

from ..dependencies import get_core
from ..dependencies import http_error
from ..dependencies import unwrap
from ..models.requests import WriteFileRequest
from ..models.responses import OperationAck
from ..models.responses import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["files"])


@router.get("/file", response_model=FileRecord)
async def read_file(
    path: str = Query(default="", description="File path relative to the root"),
    core: FileSystemCore = Depends(get_core),
) -> FileRecord:
    """Read a file.

    Binary files are reported with isBinary=true and content=null.

    Raises:
        400: No path given, or path is a directory
        403: Path escapes root
        404: File doesn't exist
    """
    result = await core.execute(OperationRequest(kind=OperationKind.READ, params={"relativePath": path}))
    return unwrap(result)


@router.post("/file", response_model=WriteResult)
async def write_file(
    request: WriteFileRequest,
    core: FileSystemCore = Depends(get_core),
) -> WriteResult:
    """Create or overwrite a file. The last write wins.

    Raises:
        400: No path given, or path is a directory
        403: Path escapes root
        404: Parent directory missing and createDirectories is false
    """
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.WRITE,
            params={
                "relativePath": request.path,
                "content": request.content,
                "createDirectories": request.create_directories,
            },
        )
    )
    return unwrap(result)


@router.delete("/file", response_model=OperationAck)
async def delete_file(
    path: str = Query(default="", description="File path relative to the root"),
    core: FileSystemCore = Depends(get_core),
) -> OperationAck:
    """Delete a single file."""
    result = await core.execute(OperationRequest(kind=OperationKind.DELETE_FILE, params={"relativePath": path}))
    unwrap(result)
    return OperationAck(message="File deleted successfully", path=path)


@router.get("/file/download")
async def download_file(
    path: str = Query(default="", description="File path relative to the root"),
    core: FileSystemCore = Depends(get_core),
) -> FileResponse:
    """Download a file as an attachment."""
    try:
        file_path = await asyncio.to_thread(core.files.locate, path)
    except FileSystemError as e:
        raise http_error(e) from e

    logger.info(f"Serving download: {path}")
    return FileResponse(file_path, filename=file_path.name)


@router.post("/upload", response_model=UploadResponse)
async def upload_files(
    files: list[UploadFile] = File(..., description="Files to store"),
    path: str = Form(default="", description="Target directory relative to the root"),
    core: FileSystemCore = Depends(get_core),
) -> UploadResponse:
    """Upload one or more files into an existing directory.

    Files are stored in order; if one fails, the ones before it stay stored.
    """
    stored: list[UploadedFile] = []
    for upload in files:
        data = await upload.read()
        result = await core.execute(
            OperationRequest(
                kind=OperationKind.UPLOAD,
                params={"relativePath": path, "fileName": upload.filename, "data": data},
            )
        )
        if not result.success:
            logger.warning(f"Upload into /{path} stopped at {upload.filename!r}, {len(stored)} file(s) already stored")
        stored.append(unwrap(result))

    logger.info(f"Uploaded {len(stored)} file(s) into /{path}")
    return UploadResponse(message="Files uploaded successfully", files=stored)
