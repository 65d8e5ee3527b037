"""
Markdown Locator - typo-tolerant search for a markdown document viewer.

Locates a typed query inside document text, per line, or across spans of
rendered word tokens, highlights the matching tokens, resolves heading anchors
to slugs and filters discovered markdown files by path.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.fuzzy_matcher import FuzzyMatcher
from .core.word_matcher import WordMatcher
from .models.word import MdFile, Word, WordType

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "WordMatcher",
    "MdFile",
    "Word",
    "WordType",
]
