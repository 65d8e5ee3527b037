"""Document token and file descriptor models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class WordType(str, Enum):
    """Display style of a rendered token."""

    NORMAL = "normal"
    WHITE = "white"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    LINK = "link"
    SELECTED = "selected"


class Word(BaseModel):
    """A single token of a parsed document (a word or a separator)."""

    content: str = Field(..., description="Token text")
    kind: WordType = Field(default=WordType.NORMAL, description="Display style")
    previous_kind: Optional[WordType] = Field(
        None, description="Style the token had before it was selected"
    )

    def set_kind(self, kind: WordType) -> None:
        """Change the display style, remembering the current one."""
        if self.kind != kind:
            self.previous_kind = self.kind
        self.kind = kind

    @property
    def is_selected(self) -> bool:
        return self.kind == WordType.SELECTED


# A heading is rendered as one or more rows of tokens
Heading = List[List[Word]]


class MdFile(BaseModel):
    """Markdown file descriptor produced by file discovery."""

    path: str = Field(..., description="Full path of the file")
    name: str = Field(..., description="Bare file name")
