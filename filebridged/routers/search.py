"""Search API endpoint."""

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query

from filebridge_library.fs import FileSystemCore
from filebridge_library.fs import OperationKind
from filebridge_library.fs import OperationRequest
from filebridge_library.models.files import SearchResults

from ..dependencies import get_core
from ..dependencies import unwrap

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.get("/search", response_model=SearchResults)
async def search(
    q: str = Query(default="", description="Regular expression to search for"),
    path: str = Query(default="", description="Directory to search from, defaults to root"),
    types: str | None = Query(default=None, description="Comma-separated language tags to restrict files to"),
    case: bool = Query(default=False, description="Case-sensitive matching"),
    core: FileSystemCore = Depends(get_core),
) -> SearchResults:
    """Search file and directory names and file contents.

    The query is a regular expression; escape metacharacters for a literal
    search. At most 100 results are returned, totalResults counts all hits.

    Raises:
        400: Missing query or invalid pattern
        403: Path escapes root
        404: Path doesn't exist
    """
    file_types = [tag.strip() for tag in types.split(",") if tag.strip()] if types else None

    result = await core.execute(
        OperationRequest(
            kind=OperationKind.SEARCH,
            params={
                "query": q,
                "searchRelativePath": path,
                "fileTypeFilter": file_types,
                "caseSensitive": case,
            },
        )
    )
    return unwrap(result)
