"""Core search engine functionality."""

from .engine import SearchEngine
from .file_finder import FileFinder, find_files
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import HeadingNormalizer
from .windows import char_windows
from .word_matcher import WordMatcher

__all__ = [
    "SearchEngine",
    "FileFinder",
    "FuzzyMatcher",
    "HeadingNormalizer",
    "WordMatcher",
    "char_windows",
    "find_files",
]
