"""Enumerate and read documents from the corpus directory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List

from mcpdocs.errors import InvalidIdentifier, IOFailure, NotFound
from mcpdocs.models import Document
from mcpdocs.utils.files import is_safe_identifier, iter_document_paths

LOGGER = logging.getLogger(__name__)


class CorpusScanner:
    """Read-only view over the top level of a documentation directory.

    Nothing is cached: every call goes back to the filesystem, so documents
    added or removed between calls are reflected immediately.
    """

    def __init__(self, root: Path, *, extension: str = ".md") -> None:
        self.root = Path(root)
        self.extension = extension

    def validate(self, identifier: str) -> str:
        """Reject identifiers that could escape the corpus root."""
        if not is_safe_identifier(identifier, self.extension):
            raise InvalidIdentifier(f"Invalid filename: {identifier}", identifier=identifier)
        return identifier

    def list_identifiers(self) -> List[str]:
        """Identifiers currently present, in name order.

        Raises IOFailure when the root itself cannot be listed.
        """
        try:
            identifiers = [path.name for path in iter_document_paths(self.root, self.extension)]
        except OSError as exc:
            raise IOFailure(f"Unable to list {self.root}: {exc}") from exc
        LOGGER.debug("Found %d documents in %s", len(identifiers), self.root)
        return identifiers

    def read(self, identifier: str) -> Document:
        """Read one document by identifier."""
        self.validate(identifier)
        path = self.root / identifier
        try:
            stat = path.stat()
            if not path.is_file():
                raise NotFound(f"File not found: {identifier}", identifier=identifier)
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFound(f"File not found: {identifier}", identifier=identifier) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise IOFailure(f"Unable to read {identifier}: {exc}", identifier=identifier) from exc

        return Document(
            identifier=identifier,
            text=text,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    def iter_documents(self) -> Iterator[Document]:
        """Yield every readable document, skipping ones that fail mid-scan.

        An unreadable root degrades to an empty corpus.
        """
        try:
            identifiers = self.list_identifiers()
        except IOFailure as exc:
            LOGGER.warning("Documentation directory unavailable: %s", exc)
            return

        for identifier in identifiers:
            try:
                yield self.read(identifier)
            except (NotFound, IOFailure) as exc:
                LOGGER.warning("Skipping %s: %s", identifier, exc)
