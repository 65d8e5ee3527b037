"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .word import Word


class TextSearchRequest(BaseModel):
    """Request model for raw text searches."""

    query: str = Field(..., min_length=1, description="Search query")
    text: str = Field(..., description="Text to search in")
    precision: Optional[int] = Field(
        None, ge=0, description="Maximum edit distance; omit for exact-then-one-typo backoff"
    )


class LineSearchRequest(BaseModel):
    """Request model for line-oriented searches."""

    query: str = Field(..., min_length=1, description="Search query")
    lines: List[str] = Field(..., description="Lines of text")
    precision: int = Field(default=0, ge=0, description="Maximum edit distance")
    with_offsets: bool = Field(
        default=False, description="Whether to return (line, offset) pairs"
    )


class WordSearchRequest(BaseModel):
    """Request model for token-span searches."""

    query: str = Field(..., description="Search query, may span several words")
    words: List[Word] = Field(..., description="Document tokens, words and separators alternating")
    mark: bool = Field(default=False, description="Whether to return the words with matches selected")


class HeadingResolveRequest(BaseModel):
    """Request model for resolving an anchor against headings."""

    anchor: str = Field(..., min_length=1, description="Anchor slug, without the leading '#'")
    headings: List[List[List[Word]]] = Field(
        ..., description="Headings, each a list of token rows"
    )

    @field_validator("anchor")
    @classmethod
    def validate_anchor(cls, v: str) -> str:
        """Drop the leading '#' of link targets."""
        return v.lstrip("#")
