"""Markdown file discovery and filename filtering."""

import os
from typing import List, Optional, Sequence

import structlog

from ..models.word import MdFile
from .fuzzy_matcher import FuzzyMatcher
from .windows import char_windows

logger = structlog.get_logger(__name__)


def find_files(files: Sequence[MdFile], query: str) -> List[MdFile]:
    """
    Keep the files whose path contains the query exactly.

    Args:
        files: Candidate files
        query: Filter typed by the user; empty keeps every file

    Returns:
        Matching files in input order
    """
    if not query:
        return list(files)

    case_sensitive = FuzzyMatcher.is_case_sensitive(query)
    if not case_sensitive:
        query = query.lower()

    result = []
    for md_file in files:
        path = md_file.path if case_sensitive else md_file.path.lower()
        if any(
            FuzzyMatcher.score(window, query) == 0
            for window in char_windows(path, len(query))
        ):
            result.append(md_file)
    return result


class FileFinder:
    """Walks a directory tree collecting markdown files."""

    def __init__(
        self,
        respect_gitignore: bool = True,
        ignore_file: str = ".gitignore",
        extension: str = "md",
        fuzzy_matcher: Optional[FuzzyMatcher] = None
    ) -> None:
        """
        Initialize the file finder.

        Args:
            respect_gitignore: Whether to drop files matching the ignore file
            ignore_file: Name of the ignore file, relative to the root
            extension: File extension to collect, without the dot
            fuzzy_matcher: Matcher used to test ignore patterns
        """
        self.respect_gitignore = respect_gitignore
        self.ignore_file = ignore_file
        self.extension = extension.lstrip(".")
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()

    def load_ignore_patterns(self, root: str) -> List[str]:
        """Read ignore patterns, skipping comments and blank lines."""
        if not self.respect_gitignore:
            return []

        ignore_path = os.path.join(root, self.ignore_file)
        try:
            with open(ignore_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError):
            logger.debug("Ignore file not readable", path=ignore_path)
            return []

        return [line for line in lines if line and not line.startswith("#")]

    def is_ignored(self, path: str, patterns: Sequence[str]) -> bool:
        """Check whether any ignore pattern occurs in the path."""
        return any(self.fuzzy_matcher.find(pattern, path, 0) for pattern in patterns)

    def find_md_files(self, root: str = ".") -> List[MdFile]:
        """
        Collect every markdown file below root.

        Unreadable directories and entries are skipped; symlinked
        directories are not followed.

        Args:
            root: Directory to start from

        Returns:
            Discovered files sorted by path
        """
        patterns = self.load_ignore_patterns(root)
        suffix = "." + self.extension

        files = []
        stack = [root]
        while stack:
            directory = stack.pop()
            try:
                entries = list(os.scandir(directory))
            except OSError as e:
                logger.debug("Skipping unreadable directory", path=directory, error=str(e))
                continue

            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
                        continue
                    if not entry.is_file() or not entry.name.endswith(suffix):
                        continue
                except OSError as e:
                    logger.debug("Skipping unreadable entry", path=entry.path, error=str(e))
                    continue

                if self.is_ignored(entry.path, patterns):
                    continue

                files.append(MdFile(path=entry.path, name=entry.name))

        files.sort(key=lambda md_file: md_file.path)
        logger.debug("Markdown files discovered", root=root, total_files=len(files))
        return files
