"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DOCS_DIR_ENV = "MCP_DOCS_DIR"
DOCS_DIR_NAME = "scraped_docs"


def _find_docs_dir(start: Path) -> Path | None:
    """Walk up from ``start`` looking for a ``scraped_docs`` directory."""
    for candidate in (start, *start.parents):
        docs_dir = candidate / DOCS_DIR_NAME
        if docs_dir.is_dir():
            return docs_dir
    return None


def _get_default_docs_dir() -> Path:
    """Get the default corpus directory based on environment and working directory."""
    # Explicit override always wins
    env_dir = os.environ.get(DOCS_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()

    # When running from a checkout, prefer the nearest scraped_docs/
    found = _find_docs_dir(Path.cwd())
    if found is not None:
        return found

    return Path(DOCS_DIR_NAME)


@dataclass(slots=True)
class AppConfig:
    docs_dir: Path | None = None
    uri_scheme: str = "docs://"
    extension: str = ".md"
    mime_type: str = "text/markdown"
    display_limit: int = 10

    def __post_init__(self) -> None:
        if self.docs_dir is None:
            self.docs_dir = _get_default_docs_dir()

    def resolve_docs_dir(self, base_dir: Path | None = None) -> Path:
        if self.docs_dir is None:
            self.docs_dir = _get_default_docs_dir()
        if Path(self.docs_dir).is_absolute() or base_dir is None:
            return Path(self.docs_dir)
        return base_dir / self.docs_dir
