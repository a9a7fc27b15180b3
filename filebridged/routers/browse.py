"""Directory browsing API endpoints."""

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query

from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import OperationKind
from filebridge_library.fs import OperationRequest
from filebridge_library.models.files import DirectoryListing
from filebridge_library.models.files import DirectoryTree

from ..dependencies import get_core
from ..dependencies import unwrap

router = APIRouter(prefix="/api/v1", tags=["browse"])


@router.get("/browse", response_model=DirectoryListing)
async def browse(
    path: str = Query(default="", description="Relative path to list, defaults to root"),
    core: FileSystemCore = Depends(get_core),
) -> DirectoryListing:
    """List files and directories at the specified path.

    Directories come first, then files, each group ordered by name.
    Hidden entries are included and flagged with isHidden.

    Args:
        path: Relative path from the root (default: "" for root)
        core: Injected filesystem core

    Returns:
        DirectoryListing with current path, parent path and entries

    Raises:
        403: Path escapes root
        404: Path doesn't exist
        400: Path is not a directory
    """
    result = await core.execute(OperationRequest(kind=OperationKind.LIST, params={"relativePath": path}))
    return unwrap(result)


@router.get("/tree", response_model=DirectoryTree, response_model_exclude_none=True)
async def tree(
    path: str = Query(default="", description="Relative path to start from, defaults to root"),
    depth: int | None = Query(default=None, ge=1, le=32, description="Maximum depth (default: 3)"),
    core: FileSystemCore = Depends(get_core),
) -> DirectoryTree:
    """Get the directory tree below a path.

    Hidden entries are skipped. Directories at the depth limit are listed
    without a children field.
    """
    result = await core.execute(
        OperationRequest(kind=OperationKind.TREE, params={"relativePath": path, "maxDepth": depth})
    )
    return unwrap(result)
