"""Document file API endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query

from ..models.response import FileListResponse, LineSearchResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["files"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/files",
    response_model=FileListResponse,
    summary="Filter markdown files",
    description="List discovered markdown files whose path contains the query"
)
async def list_files(
    query: str = Query("", description="Filter typed by the user; empty lists every file"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=1000,
        description="Maximum number of files to return"
    )
) -> FileListResponse:
    """
    Filter discovered files by path.

    Uppercase letters in the query make the filter case sensitive.
    """
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    result = search_engine.filter_files(query)
    limit = max_results or settings.max_results
    result.files = result.files[:limit]
    return result


@router.post(
    "/files/reload",
    response_model=FileListResponse,
    summary="Rediscover markdown files",
    description="Walk the documents root again and replace the known file list"
)
async def reload_files() -> FileListResponse:
    """Run file discovery again."""
    root = search_engine.root or settings.docs_root
    files = search_engine.load_files(root)
    logger.info("Markdown files reloaded", root=root, total_files=len(files))
    return search_engine.filter_files("")


@router.get(
    "/files/search",
    response_model=LineSearchResponse,
    summary="Search inside a document",
    description="Search the lines of one discovered markdown file"
)
async def search_file(
    path: str = Query(..., description="Path of a discovered file"),
    query: str = Query(..., min_length=1, description="Search query"),
    precision: Optional[int] = Query(
        None,
        ge=0,
        description="Maximum edit distance; omit for exact-then-one-typo backoff"
    )
) -> LineSearchResponse:
    """Search one document line by line."""
    if search_engine.get_file(path) is None:
        raise HTTPException(status_code=404, detail=f"File '{path}' not found")

    try:
        return search_engine.search_document(path, query, precision)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Document not readable", path=path, error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Failed to read document: {str(e)}"
        )
