"""Main search engine implementation."""

import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.response import (
    FileListResponse,
    HeadingResolveResponse,
    LineSearchResponse,
    TextSearchResponse,
    WordSearchResponse,
)
from ..models.word import Heading, MdFile, Word
from .file_finder import FileFinder, find_files
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import HeadingNormalizer
from .word_matcher import WordMatcher


class SearchEngine:
    """Entry point tying matching, marking and file discovery together."""

    def __init__(
        self,
        respect_gitignore: bool = True,
        ignore_file: str = ".gitignore",
        extension: str = "md"
    ) -> None:
        """
        Initialize the search engine.

        Args:
            respect_gitignore: Whether file discovery honours the ignore file
            ignore_file: Name of the ignore file
            extension: Extension of the documents to discover
        """
        self.fuzzy_matcher = FuzzyMatcher()
        self.word_matcher = WordMatcher(self.fuzzy_matcher)
        self.normalizer = HeadingNormalizer()
        self.file_finder = FileFinder(
            respect_gitignore=respect_gitignore,
            ignore_file=ignore_file,
            extension=extension,
            fuzzy_matcher=self.fuzzy_matcher,
        )
        self.files: List[MdFile] = []
        self.root: Optional[str] = None

        # Performance tracking
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "no_matches": 0,
            "marked_words": 0,
            "total_execution_time": 0.0,
        }

    def load_files(self, root: str = ".") -> List[MdFile]:
        """
        Discover the markdown files below root and keep them for filtering.

        Args:
            root: Directory to walk

        Returns:
            The discovered files
        """
        self.root = root
        self.files = self.file_finder.find_md_files(root)
        return self.files

    def set_files(self, files: Sequence[MdFile]) -> None:
        """Replace the known files."""
        self.files = list(files)

    def get_file(self, path: str) -> Optional[MdFile]:
        """Look up a known file by path."""
        for md_file in self.files:
            if md_file.path == path:
                return md_file
        return None

    def filter_files(self, query: str) -> FileListResponse:
        """Filter the known files by path."""
        start_time = time.time()
        files = find_files(self.files, query)
        execution_time = self._record(query, exact=bool(files), fuzzy=False, start_time=start_time)

        return FileListResponse(
            query=query,
            files=files,
            total_results=len(files),
            total_files=len(self.files),
            execution_time_ms=execution_time,
        )

    def search_text(
        self,
        query: str,
        text: str,
        precision: Optional[int] = None
    ) -> TextSearchResponse:
        """
        Search raw text.

        Args:
            query: Search query
            text: Text to search in
            precision: Maximum edit distance; None tries exact then one typo

        Returns:
            TextSearchResponse with the match offsets
        """
        start_time = time.time()

        if precision is None:
            offsets, used_precision = self.fuzzy_matcher.with_backoff(
                lambda p: self.fuzzy_matcher.find(query, text, p)
            )
        else:
            used_precision = precision
            offsets = self.fuzzy_matcher.find(query, text, precision)

        exact = bool(offsets) and used_precision == 0
        execution_time = self._record(
            query, exact=exact, fuzzy=bool(offsets) and not exact, start_time=start_time
        )

        return TextSearchResponse(
            query=query,
            precision=used_precision,
            offsets=offsets,
            total_results=len(offsets),
            exact_match=exact,
            execution_time_ms=execution_time,
        )

    def search_lines(
        self,
        query: str,
        lines: Sequence[str],
        precision: int = 0,
        with_offsets: bool = False
    ) -> LineSearchResponse:
        """
        Search line by line.

        Args:
            query: Search query
            lines: Lines of text
            precision: Maximum edit distance
            with_offsets: Whether to report (line, offset) pairs too

        Returns:
            LineSearchResponse with the matching line indices
        """
        start_time = time.time()
        if with_offsets:
            matches = self.fuzzy_matcher.line_match_and_index(query, lines, precision)
            return self._line_response(query, precision, matches, start_time)

        line_indices = self.fuzzy_matcher.line_match(query, lines, precision)
        return self._line_response(query, precision, None, start_time, line_indices)

    def search_document(
        self,
        path: str,
        query: str,
        precision: Optional[int] = None
    ) -> LineSearchResponse:
        """
        Search inside a markdown file line by line.

        Without a precision, an exact search runs first and one typo is
        tolerated only when it finds nothing.

        Raises:
            OSError: If the file cannot be read
        """
        start_time = time.time()
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()

        if precision is None:
            matches, precision = self.fuzzy_matcher.with_backoff(
                lambda p: self.fuzzy_matcher.line_match_and_index(query, lines, p)
            )
        else:
            matches = self.fuzzy_matcher.line_match_and_index(query, lines, precision)

        return self._line_response(query, precision, matches, start_time)

    def _line_response(
        self,
        query: str,
        precision: int,
        matches: Optional[List[Tuple[int, int]]],
        start_time: float,
        line_indices: Optional[List[int]] = None
    ) -> LineSearchResponse:
        if matches is not None:
            line_indices = sorted({line for line, _ in matches})

        found = bool(line_indices)
        execution_time = self._record(
            query,
            exact=found and precision == 0,
            fuzzy=found and precision > 0,
            start_time=start_time,
        )

        return LineSearchResponse(
            query=query,
            precision=precision,
            lines=line_indices,
            matches=matches,
            total_results=len(matches) if matches is not None else len(line_indices),
            execution_time_ms=execution_time,
        )

    def search_words(self, query: str, words: Sequence[Word]) -> WordSearchResponse:
        """Find exact span matches in a token sequence without changing it."""
        start_time = time.time()
        return self._word_response(query, words, mark=False, start_time=start_time)

    def mark_words(self, query: str, words: Sequence[Word]) -> WordSearchResponse:
        """Select the tokens of every span matching the query, in place."""
        start_time = time.time()
        return self._word_response(query, words, mark=True, start_time=start_time)

    def _word_response(
        self,
        query: str,
        words: Sequence[Word],
        mark: bool,
        start_time: float
    ) -> WordSearchResponse:
        size = self.word_matcher.span_length(query)
        starts = self.word_matcher.match_indices(query, words)
        indices = [index for start in starts for index in range(start, start + size)]

        if mark:
            self.word_matcher.mark_spans(words, starts, size)
            self._stats["marked_words"] += len(set(indices))

        execution_time = self._record(query, exact=bool(starts), fuzzy=False, start_time=start_time)

        return WordSearchResponse(
            query=query,
            span_length=size,
            starts=starts,
            indices=indices,
            total_results=len(starts),
            words=list(words) if mark else None,
            execution_time_ms=execution_time,
        )

    def resolve_heading(
        self,
        anchor: str,
        headings: Sequence[Heading]
    ) -> HeadingResolveResponse:
        """Find the heading an in-document link points to."""
        index = self.normalizer.find_heading(anchor, headings)
        return HeadingResolveResponse(
            anchor=anchor,
            heading_index=index,
            found=index is not None,
            slugs=self.normalizer.slugify_all(headings),
        )

    def _record(self, query: str, exact: bool, fuzzy: bool, start_time: float) -> float:
        """Update statistics for one query and return its duration in ms."""
        execution_time = (time.time() - start_time) * 1000

        self._stats["total_queries"] += 1
        if exact:
            self._stats["exact_matches"] += 1
        elif fuzzy:
            self._stats["fuzzy_matches"] += 1
        else:
            self._stats["no_matches"] += 1
        self._stats["total_execution_time"] += execution_time

        return execution_time

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["exact_match_rate"] = stats["exact_matches"] / stats["total_queries"]
            stats["fuzzy_match_rate"] = stats["fuzzy_matches"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["fuzzy_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["file_stats"] = {
            "root": self.root,
            "total_files": len(self.files),
        }

        return stats

    def reset_stats(self) -> None:
        """Reset query statistics."""
        self._stats = self._empty_stats()

    def clear(self) -> None:
        """Forget discovered files and reset statistics."""
        self.files = []
        self.root = None
        self.reset_stats()
