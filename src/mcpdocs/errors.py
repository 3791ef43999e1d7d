"""Error taxonomy for corpus access."""

from __future__ import annotations


class DocsError(Exception):
    """Base class for documentation access failures."""

    def __init__(self, message: str, *, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class InvalidIdentifier(DocsError, ValueError):
    """A reference or identifier failed validation; the filesystem was not touched."""


class NotFound(DocsError, LookupError):
    """A well-formed identifier does not name an existing document."""


class IOFailure(DocsError):
    """The corpus root or a document could not be read."""
