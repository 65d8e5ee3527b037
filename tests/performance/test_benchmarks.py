"""Performance benchmarks for the Markdown Locator."""

import random
import string

import pytest
from markdown_locator.core.engine import SearchEngine
from markdown_locator.models.word import MdFile, Word, WordType


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def engine(self):
        return SearchEngine()

    @pytest.fixture
    def document(self):
        """A long generated document with a few known words."""
        random.seed(42)
        words = [
            "".join(random.choices(string.ascii_lowercase, k=random.randint(2, 9)))
            for _ in range(5000)
        ]
        words[1200] = "markdown"
        words[3400] = "markdown"
        return " ".join(words)

    @pytest.fixture
    def tokens(self, document):
        result = []
        for index, content in enumerate(document.split(" ")):
            if index:
                result.append(Word(content=" ", kind=WordType.WHITE))
            result.append(Word(content=content))
        return result

    def test_exact_text_search_performance(self, engine, document, benchmark):
        """Benchmark exact search over a long text."""
        result = benchmark(engine.search_text, "markdown", document)
        assert result.exact_match is True
        assert result.total_results >= 2

    def test_backoff_text_search_performance(self, engine, document, benchmark):
        """Benchmark the one-typo backoff over a long text."""
        result = benchmark(engine.search_text, "makrdown", document)
        assert result.precision == 1
        assert result.total_results >= 2

    def test_line_search_performance(self, engine, document, benchmark):
        """Benchmark line search with offsets."""
        words = document.split(" ")
        lines = [" ".join(words[i:i + 10]) for i in range(0, len(words), 10)]
        result = benchmark(engine.search_lines, "markdown", lines, 0, True)
        assert len(result.lines) >= 2

    def test_word_search_performance(self, engine, tokens, benchmark):
        """Benchmark token span search."""
        result = benchmark(engine.search_words, "markdown", tokens)
        assert result.total_results >= 2

    def test_filename_filter_performance(self, engine, benchmark):
        """Benchmark filename filtering over many files."""
        engine.set_files(
            MdFile(path=f"./docs/section_{i}/page_{i}.md", name=f"page_{i}.md")
            for i in range(2000)
        )
        result = benchmark(engine.filter_files, "page_1999")
        assert [f.name for f in result.files] == ["page_1999.md"]
