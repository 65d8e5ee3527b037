"""Search API endpoints."""

from fastapi import APIRouter, HTTPException

from ..models.request import (
    HeadingResolveRequest,
    LineSearchRequest,
    TextSearchRequest,
    WordSearchRequest,
)
from ..models.response import (
    HeadingResolveResponse,
    LineSearchResponse,
    TextSearchResponse,
    WordSearchResponse,
)
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.post(
    "/search/text",
    response_model=TextSearchResponse,
    summary="Search raw text",
    description="Find every offset where the query occurs in a text, tolerating one typo when nothing matches exactly"
)
async def search_text(request: TextSearchRequest) -> TextSearchResponse:
    """
    Search a block of rendered document text.

    Without an explicit precision the search is exact first and falls back
    to one typo only when the exact search finds nothing.
    """
    _check_query_length(request.query)
    return search_engine.search_text(request.query, request.text, request.precision)


@router.post(
    "/search/lines",
    response_model=LineSearchResponse,
    summary="Search line by line",
    description="Find the lines, and optionally the offsets within them, that match the query"
)
async def search_lines(request: LineSearchRequest) -> LineSearchResponse:
    """Search every line of a document with a fixed precision."""
    _check_query_length(request.query)
    return search_engine.search_lines(
        request.query,
        request.lines,
        precision=request.precision,
        with_offsets=request.with_offsets,
    )


@router.post(
    "/search/words",
    response_model=WordSearchResponse,
    summary="Search word tokens",
    description="Find exact matches across spans of word and separator tokens, optionally selecting them"
)
async def search_words(request: WordSearchRequest) -> WordSearchResponse:
    """
    Search a tokenized document.

    With ``mark`` set, the returned words carry the selected style on every
    token of every matched span.
    """
    _check_query_length(request.query)
    if request.mark:
        return search_engine.mark_words(request.query, request.words)
    return search_engine.search_words(request.query, request.words)


@router.post(
    "/headings/resolve",
    response_model=HeadingResolveResponse,
    summary="Resolve an anchor",
    description="Find the heading whose slug equals the anchor of an in-document link"
)
async def resolve_heading(request: HeadingResolveRequest) -> HeadingResolveResponse:
    """Resolve an anchor against a document's headings."""
    return search_engine.resolve_heading(request.anchor, request.headings)
