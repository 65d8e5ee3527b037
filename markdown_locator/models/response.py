"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .word import MdFile, Word


class TextSearchResponse(BaseModel):
    """Response for raw text searches."""

    query: str = Field(..., description="Original search query")
    precision: int = Field(..., description="Precision that produced the offsets")
    offsets: List[int] = Field(..., description="Codepoint offsets of the matches")
    total_results: int = Field(..., description="Total number of matches")
    exact_match: bool = Field(..., description="Whether the matches are exact")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class LineSearchResponse(BaseModel):
    """Response for line-oriented searches."""

    query: str = Field(..., description="Original search query")
    precision: int = Field(..., description="Precision used for the search")
    lines: List[int] = Field(..., description="Indices of matching lines")
    matches: Optional[List[Tuple[int, int]]] = Field(
        None, description="(line, offset) pairs when offsets were requested"
    )
    total_results: int = Field(..., description="Total number of matches")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class WordSearchResponse(BaseModel):
    """Response for token-span searches."""

    query: str = Field(..., description="Original search query")
    span_length: int = Field(..., description="Number of tokens in one matched span")
    starts: List[int] = Field(..., description="Token indices where matched spans start")
    indices: List[int] = Field(..., description="Token indices of every matched span, flattened")
    total_results: int = Field(..., description="Number of matched spans")
    words: Optional[List[Word]] = Field(None, description="Tokens with matches selected")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class HeadingResolveResponse(BaseModel):
    """Response for anchor resolution."""

    anchor: str = Field(..., description="Anchor that was resolved")
    heading_index: Optional[int] = Field(None, description="Index of the matching heading")
    found: bool = Field(..., description="Whether a heading matched")
    slugs: List[str] = Field(..., description="Slug of every heading, in order")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class FileListResponse(BaseModel):
    """Response for filename filtering."""

    query: str = Field(..., description="Original filter query")
    files: List[MdFile] = Field(..., description="Files whose path matches the query")
    total_results: int = Field(..., description="Number of matching files")
    total_files: int = Field(..., description="Number of discovered files")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    exact_match_rate: float = Field(..., description="Share of queries answered exactly")
    fuzzy_match_rate: float = Field(..., description="Share of queries answered by the one-typo backoff")
    no_match_rate: float = Field(..., description="Share of queries without matches")
    marked_words: int = Field(..., description="Tokens selected by marking searches")
    memory_usage_mb: float = Field(..., description="Memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
