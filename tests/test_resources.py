"""Tests for the resource catalog."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.errors import InvalidIdentifier, NotFound
from mcpdocs.resources import ResourceCatalog
from tests.conftest import write_docs


class TestListResources:
    """Tests for ResourceCatalog.list_resources."""

    def test_sorted_by_priority_then_name(self, scanner: CorpusScanner) -> None:
        descriptors = ResourceCatalog(scanner).list_resources()

        assert [item.uri for item in descriptors] == [
            "docs://intro.md",
            "docs://architecture.md",
            "docs://build-server.md",
            "docs://notes.md",
        ]
        assert [item.priority for item in descriptors] == [1.0, 0.9, 0.8, 0.3]

    def test_descriptor_fields(self, scanner: CorpusScanner, docs_dir: Path) -> None:
        os.utime(docs_dir / "intro.md", (0, 0))

        intro = ResourceCatalog(scanner).list_resources()[0]

        assert intro.name == "Getting Started"
        assert intro.description == "Welcome to the protocol."
        assert intro.mime_type == "text/markdown"
        assert intro.audience == ["user", "assistant"]
        assert intro.last_modified == "1970-01-01T00:00:00.000Z"

    def test_names_break_priority_ties(self, tmp_path: Path) -> None:
        root = write_docs(
            tmp_path / "docs",
            {"tools-a.md": "# Zeta\n", "tools-b.md": "# alpha\n", "tools-c.md": "# Beta\n"},
        )

        names = [item.name for item in ResourceCatalog(CorpusScanner(root)).list_resources()]

        assert names == ["alpha", "Beta", "Zeta"]

    def test_missing_corpus_lists_nothing(self, tmp_path: Path) -> None:
        assert ResourceCatalog(CorpusScanner(tmp_path / "missing")).list_resources() == []


class TestReadResource:
    """Tests for ResourceCatalog.read_resource."""

    def test_read(self, scanner: CorpusScanner) -> None:
        content = ResourceCatalog(scanner).read_resource("docs://intro.md")

        assert content.uri == "docs://intro.md"
        assert content.mime_type == "text/markdown"
        assert content.text.startswith("# Getting Started")
        assert content.last_modified.endswith("Z")

    def test_not_found(self, scanner: CorpusScanner) -> None:
        with pytest.raises(NotFound):
            ResourceCatalog(scanner).read_resource("docs://absent.md")

    def test_traversal_rejected_before_filesystem(self, scanner: CorpusScanner) -> None:
        with patch.object(Path, "stat") as mock_stat:
            with pytest.raises(InvalidIdentifier):
                ResourceCatalog(scanner).read_resource("docs://../../etc/passwd")
        mock_stat.assert_not_called()

    def test_foreign_scheme_rejected(self, scanner: CorpusScanner) -> None:
        with pytest.raises(InvalidIdentifier):
            ResourceCatalog(scanner).read_resource("mcp-docs://intro.md")

    def test_custom_scheme_and_mime(self, scanner: CorpusScanner) -> None:
        catalog = ResourceCatalog(scanner, scheme="mcp-docs://", mime_type="text/plain")

        content = catalog.read_resource("mcp-docs://intro.md")

        assert content.mime_type == "text/plain"
