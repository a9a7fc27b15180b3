"""Directory create/delete API endpoints."""

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query

from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import OperationKind
from filebridge_library.fs import OperationRequest

from ..dependencies import get_core
from ..dependencies import unwrap
from ..models.requests import CreateDirectoryRequest
from ..models.responses import OperationAck

router = APIRouter(prefix="/api/v1", tags=["directories"])


@router.post("/directory", response_model=OperationAck, status_code=201)
async def create_directory(
    request: CreateDirectoryRequest,
    core: FileSystemCore = Depends(get_core),
) -> OperationAck:
    """Create a directory.

    With recursive=true (the default) missing parents are created and an
    existing directory is accepted (mkdir -p behavior).

    Raises:
        400: No path given
        403: Path escapes root
        404: Parent missing and recursive is false
        409: Directory exists and recursive is false, or a file is in the way
    """
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.CREATE_DIRECTORY,
            params={"relativePath": request.path, "recursive": request.recursive},
        )
    )
    created = unwrap(result)
    return OperationAck(message="Directory created successfully", path=created)


@router.delete("/directory", response_model=OperationAck)
async def delete_directory(
    path: str = Query(default="", description="Directory path relative to the root"),
    recursive: bool = Query(default=False, description="Delete the whole subtree"),
    core: FileSystemCore = Depends(get_core),
) -> OperationAck:
    """Delete a directory. Recursive deletion cannot be undone.

    Raises:
        400: Path is a file
        403: Path escapes root or is the root
        404: Directory doesn't exist
        409: Directory not empty and recursive is false
    """
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.DELETE_DIRECTORY,
            params={"relativePath": path, "recursive": recursive},
        )
    )
    unwrap(result)
    return OperationAck(message="Directory deleted successfully", path=path)
