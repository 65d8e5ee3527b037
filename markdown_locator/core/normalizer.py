"""Heading slug normalization for resolving in-document anchors."""

from typing import List, Optional, Sequence

import regex

from ..models.word import Heading, Word


class HeadingNormalizer:
    """Turns heading tokens into anchor slugs."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Alphabetic includes combining vowel signs such as U+093F
        self.invalid_regex = regex.compile(r"[^\p{Alphabetic}\p{N}-]")
        self.dash_regex = regex.compile(r"-+")

    def slugify(self, rows: Sequence[Sequence[Word]]) -> str:
        """
        Build the anchor slug of a heading.

        Token contents are lowercased and joined with ``-``; everything but
        alphanumerics and ``-`` is dropped and dash runs collapse to one.
        Leading dashes are stripped, trailing ones are kept.

        Args:
            rows: Heading token rows

        Returns:
            Slug of the heading
        """
        slug = "-".join(word.content.lower() for row in rows for word in row)
        slug = slug.lstrip("-")
        slug = self.invalid_regex.sub("", slug)
        slug = self.dash_regex.sub("-", slug)
        return slug.lstrip("-")

    def compare_heading(self, anchor: str, rows: Sequence[Sequence[Word]]) -> bool:
        """Check whether a heading resolves the anchor."""
        return self.slugify(rows) == anchor

    def find_heading(
        self,
        anchor: str,
        headings: Sequence[Heading]
    ) -> Optional[int]:
        """Return the index of the first heading the anchor points to."""
        for index, rows in enumerate(headings):
            if self.compare_heading(anchor, rows):
                return index
        return None

    def slugify_all(self, headings: Sequence[Heading]) -> List[str]:
        """Slug of every heading, in order."""
        return [self.slugify(rows) for rows in headings]
