"""Exact query matching over spans of document tokens."""

from typing import Iterable, Iterator, List, Optional, Sequence

from ..models.word import Word, WordType
from .fuzzy_matcher import FuzzyMatcher


class WordMatcher:
    """Finds and highlights queries inside a word/separator token sequence."""

    def __init__(self, fuzzy_matcher: Optional[FuzzyMatcher] = None) -> None:
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()

    @staticmethod
    def span_length(query: str) -> int:
        """
        Number of tokens a query covers.

        Words and separators alternate, so ``w`` query words span ``2w - 1``
        tokens. An empty query spans nothing.
        """
        return max(2 * len(query.split()) - 1, 0)

    def match_indices(self, query: str, words: Sequence[Word]) -> List[int]:
        """
        Find where the query matches a span of tokens exactly.

        Args:
            query: Search query, possibly made of several words
            words: Document tokens

        Returns:
            Start indices of the matching spans, ascending
        """
        return list(self._iter_matches(query, words))

    def find_with_ref(self, query: str, words: Sequence[Word]) -> List[Word]:
        """
        Return the tokens of every matching span.

        The returned objects are the tokens of ``words`` themselves, flattened
        in document order; overlapping spans repeat their shared tokens.
        """
        size = self.span_length(query)
        return [
            word
            for start in self._iter_matches(query, words)
            for word in words[start:start + size]
        ]

    def find_and_mark(self, query: str, words: Sequence[Word]) -> None:
        """Select every token of every matching span, in place."""
        self.mark_spans(words, self._iter_matches(query, words), self.span_length(query))

    @staticmethod
    def mark_spans(words: Sequence[Word], starts: Iterable[int], size: int) -> None:
        """Select the ``size`` tokens beginning at each start index."""
        for start in starts:
            for word in words[start:start + size]:
                word.set_kind(WordType.SELECTED)

    @staticmethod
    def clear_selection(words: Sequence[Word]) -> int:
        """
        Restore the style selected tokens had before marking.

        Returns:
            Number of tokens that were unselected
        """
        cleared = 0
        for word in words:
            if word.is_selected:
                word.set_kind(word.previous_kind or WordType.NORMAL)
                cleared += 1
        return cleared

    def _iter_matches(self, query: str, words: Sequence[Word]) -> Iterator[int]:
        size = self.span_length(query)
        if size == 0:
            return

        case_sensitive = self.fuzzy_matcher.is_case_sensitive(query)
        if not case_sensitive:
            query = query.lower()

        # Spans running past the last token are not compared
        for start in range(len(words) - size + 1):
            joined = "".join(word.content for word in words[start:start + size])
            if not case_sensitive:
                joined = joined.lower()
            if self.fuzzy_matcher.score(query, joined) == 0:
                yield start
