"""Tests for the keyword searcher."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.index.search import Searcher, parse_category_filter
from mcpdocs.models import Category
from tests.conftest import write_docs


class TestParseCategoryFilter:
    """Tests for parse_category_filter."""

    def test_all(self) -> None:
        assert parse_category_filter("all") is None

    def test_category(self) -> None:
        assert parse_category_filter("tools") is Category.TOOLS

    @pytest.mark.parametrize("value", ["other", "overview", "nonsense"])
    def test_rejects_unknown(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_category_filter(value)


class TestSearcher:
    """Tests for Searcher.search."""

    def test_welcome_scenario(self, scanner: CorpusScanner) -> None:
        results = Searcher(scanner).search("welcome")

        assert len(results) == 1
        result = results[0]
        assert result.identifier == "intro.md"
        assert result.title == "Getting Started"
        assert result.category is Category.GETTING_STARTED
        assert result.uri == "docs://intro.md"
        assert [match.line for match in result.matches] == [3]
        assert result.matches[0].text == "Welcome to the protocol."

    def test_empty_query_returns_nothing(self, scanner: CorpusScanner) -> None:
        assert Searcher(scanner).search("") == []

    def test_sorted_by_relevance(self, scanner: CorpusScanner) -> None:
        results = Searcher(scanner).search("server")

        assert [result.identifier for result in results] == ["build-server.md", "architecture.md"]
        assert results[0].relevance > results[1].relevance

    def test_category_filter(self, scanner: CorpusScanner) -> None:
        results = Searcher(scanner).search("server", category="concepts")

        assert [result.identifier for result in results] == ["architecture.md"]

    def test_category_filter_accepts_enum(self, scanner: CorpusScanner) -> None:
        results = Searcher(scanner).search("server", category=Category.DEVELOPMENT)

        assert [result.identifier for result in results] == ["build-server.md"]

    def test_category_filter_with_no_hits(self, scanner: CorpusScanner) -> None:
        assert Searcher(scanner).search("server", category="community") == []

    def test_preview_truncated(self, tmp_path: Path) -> None:
        root = write_docs(tmp_path / "docs", {"long-tools.md": "# Long\nneedle\n" + "x" * 600})

        result = Searcher(CorpusScanner(root)).search("needle")[0]

        assert result.preview.endswith("...")
        assert len(result.preview) == 503

    def test_custom_scheme(self, scanner: CorpusScanner) -> None:
        result = Searcher(scanner, scheme="mcp-docs://").search("welcome")[0]

        assert result.uri == "mcp-docs://intro.md"

    def test_missing_corpus_yields_empty(self, tmp_path: Path) -> None:
        assert Searcher(CorpusScanner(tmp_path / "missing")).search("anything") == []
