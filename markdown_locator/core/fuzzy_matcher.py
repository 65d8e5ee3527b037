"""Approximate substring matching with a one-typo backoff."""

from typing import Callable, List, Sequence, Tuple, TypeVar

from rapidfuzz.distance import DamerauLevenshtein

from .windows import char_windows

T = TypeVar("T")


class FuzzyMatcher:
    """Locates a query inside text, tolerating up to ``precision`` edits."""

    # Precision tried after an exact search comes back empty
    BACKOFF_PRECISION = 1

    @staticmethod
    def is_case_sensitive(query: str) -> bool:
        """A query is case sensitive as soon as it holds an uppercase character."""
        return any(char.isupper() for char in query)

    @staticmethod
    def score(a: str, b: str) -> int:
        """
        Edit distance between two strings.

        Counts insertions, deletions, substitutions and transpositions of
        adjacent characters.
        """
        return DamerauLevenshtein.distance(a, b)

    def find(self, query: str, text: str, precision: int) -> List[int]:
        """
        Find every offset in text where the query matches.

        Args:
            query: Search query
            text: Text to search in
            precision: Maximum edit distance for a window to count as a match

        Returns:
            Ascending codepoint offsets of the matching windows
        """
        if precision < 0:
            raise ValueError(f"Precision must be non-negative, got {precision}")
        if not query:
            return []

        case_sensitive = self.is_case_sensitive(query)
        if not case_sensitive:
            query = query.lower()

        result = []
        for offset, window in enumerate(char_windows(text, len(query))):
            if not case_sensitive:
                window = window.lower()
            if DamerauLevenshtein.distance(query, window, score_cutoff=precision) <= precision:
                result.append(offset)

        return result

    def with_backoff(self, search: Callable[[int], List[T]]) -> Tuple[List[T], int]:
        """
        Run a search exactly, retrying with one allowed typo when it finds nothing.

        Args:
            search: Search to run, called with the precision to use

        Returns:
            Tuple of (results, precision that produced them)
        """
        result = search(0)
        if result:
            return result, 0
        return search(self.BACKOFF_PRECISION), self.BACKOFF_PRECISION

    def find_with_backoff(self, query: str, text: str) -> List[int]:
        """Exact search, retried with one allowed typo when nothing matches."""
        result, _ = self.with_backoff(lambda precision: self.find(query, text, precision))
        return result

    def line_match(self, query: str, lines: Sequence[str], precision: int) -> List[int]:
        """Return the indices of the lines containing a match."""
        return [
            index for index, line in enumerate(lines)
            if self.find(query, line, precision)
        ]

    def line_match_and_index(
        self,
        query: str,
        lines: Sequence[str],
        precision: int
    ) -> List[Tuple[int, int]]:
        """
        Return (line index, offset) pairs for every match in every line.

        Pairs are ordered by line, then by offset within a line.
        """
        return [
            (index, offset)
            for index, line in enumerate(lines)
            for offset in self.find(query, line, precision)
        ]
