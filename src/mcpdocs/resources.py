"""Documents exposed as addressable resources."""

from __future__ import annotations

import logging
from typing import List

from mcpdocs.corpus.classifier import classify, priority
from mcpdocs.corpus.metadata import extract_description, extract_title
from mcpdocs.corpus.references import DEFAULT_SCHEME, build_reference, resolve_reference
from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.models import ResourceContent, ResourceDescriptor
from mcpdocs.utils.files import format_mtime

LOGGER = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "text/markdown"
AUDIENCE = ("user", "assistant")


class ResourceCatalog:
    """List every document as a resource and read one back by reference."""

    def __init__(
        self,
        scanner: CorpusScanner,
        *,
        scheme: str = DEFAULT_SCHEME,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> None:
        self.scanner = scanner
        self.scheme = scheme
        self.mime_type = mime_type

    def list_resources(self) -> List[ResourceDescriptor]:
        """Descriptors sorted by category priority, then by name."""
        descriptors: List[ResourceDescriptor] = []
        for document in self.scanner.iter_documents():
            descriptors.append(
                ResourceDescriptor(
                    uri=build_reference(document.identifier, self.scheme),
                    name=extract_title(document.text),
                    description=extract_description(document.text, document.identifier),
                    mime_type=self.mime_type,
                    audience=list(AUDIENCE),
                    priority=priority(classify(document.identifier)),
                    last_modified=format_mtime(document.modified_at.timestamp()),
                )
            )

        descriptors.sort(key=lambda item: (-item.priority, item.name.casefold(), item.name))
        return descriptors

    def read_resource(self, reference: str) -> ResourceContent:
        """Fetch one document.

        Raises InvalidIdentifier before touching the filesystem when the
        reference is malformed, NotFound when the document does not exist.
        """
        identifier = resolve_reference(reference, self.scheme, self.scanner.extension)
        document = self.scanner.read(identifier)
        LOGGER.debug("Read resource %s", reference)
        return ResourceContent(
            uri=reference,
            mime_type=self.mime_type,
            text=document.text,
            last_modified=format_mtime(document.modified_at.timestamp()),
        )
