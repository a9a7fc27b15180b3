"""Rename, copy and move API endpoints."""

from fastapi import APIRouter
from fastapi import Depends

from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import OperationKind
from filebridge_library.fs import OperationRequest

from ..dependencies import get_core
from ..dependencies import unwrap
from ..models.requests import RenameRequest
from ..models.requests import TransferRequest
from ..models.responses import RenameResponse
from ..models.responses import TransferResponse

router = APIRouter(prefix="/api/v1", tags=["transfer"])


@router.post("/rename", response_model=RenameResponse)
async def rename(
    request: RenameRequest,
    core: FileSystemCore = Depends(get_core),
) -> RenameResponse:
    """Rename a file or directory in place.

    An existing entry with the new name may be replaced.
    """
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.RENAME,
            params={"oldRelativePath": request.old_path, "newName": request.new_name},
        )
    )
    new_path = unwrap(result)
    return RenameResponse(message="Renamed successfully", old_path=request.old_path, new_path=new_path)


@router.post("/copy", response_model=TransferResponse)
async def copy(
    request: TransferRequest,
    core: FileSystemCore = Depends(get_core),
) -> TransferResponse:
    """Copy a file or directory recursively.

    Not transactional: after an error the destination may hold a partial copy.
    """
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.COPY,
            params={
                "sourceRelativePath": request.source_path,
                "destinationRelativePath": request.destination_path,
            },
        )
    )
    unwrap(result)
    return TransferResponse(
        message="Copied successfully",
        source_path=request.source_path,
        destination_path=request.destination_path,
    )


@router.post("/move", response_model=TransferResponse)
async def move(
    request: TransferRequest,
    core: FileSystemCore = Depends(get_core),
) -> TransferResponse:
    """Move a file or directory (atomic within one filesystem)."""
    result = await core.execute(
        OperationRequest(
            kind=OperationKind.MOVE,
            params={
                "sourceRelativePath": request.source_path,
                "destinationRelativePath": request.destination_path,
            },
        )
    )
    unwrap(result)
    return TransferResponse(
        message="Moved successfully",
        source_path=request.source_path,
        destination_path=request.destination_path,
    )
