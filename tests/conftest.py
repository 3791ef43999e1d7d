"""Shared fixtures for mcpdocs tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcpdocs.corpus.scanner import CorpusScanner


def write_docs(root: Path, docs: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for name, text in docs.items():
        (root / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A small corpus spanning a few categories."""
    return write_docs(
        tmp_path / "docs",
        {
            "intro.md": "# Getting Started\n\nWelcome to the protocol.\n",
            "build-server.md": (
                "# Build a Server\n\n"
                "This guide walks through writing a server from scratch.\n"
                "Servers expose tools and resources.\n"
            ),
            "architecture.md": (
                "[Skip to content]\n"
                "# Architecture Overview\n\n"
                "The protocol follows a client-host-server architecture.\n"
            ),
            "notes.md": "Random notes without a heading\n",
        },
    )


@pytest.fixture
def scanner(docs_dir: Path) -> CorpusScanner:
    return CorpusScanner(docs_dir)
