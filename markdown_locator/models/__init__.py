"""Data models for the markdown locator."""

from .word import Heading, MdFile, Word, WordType
from .response import (
    TextSearchResponse,
    LineSearchResponse,
    WordSearchResponse,
    HeadingResolveResponse,
    FileListResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import (
    TextSearchRequest,
    LineSearchRequest,
    WordSearchRequest,
    HeadingResolveRequest,
)

__all__ = [
    "Heading",
    "MdFile",
    "Word",
    "WordType",
    "TextSearchResponse",
    "LineSearchResponse",
    "WordSearchResponse",
    "HeadingResolveResponse",
    "FileListResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "TextSearchRequest",
    "LineSearchRequest",
    "WordSearchRequest",
    "HeadingResolveRequest",
]
