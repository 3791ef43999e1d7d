"""Grouping of corpus documents by category."""

from __future__ import annotations

from typing import Dict, List

from mcpdocs.corpus.classifier import classify
from mcpdocs.corpus.metadata import extract_description, extract_title
from mcpdocs.corpus.references import DEFAULT_SCHEME, build_reference
from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.models import Category, CategoryGroup, Document, DocumentSummary

OVERVIEW_SAMPLE = 5


class CategoryBrowser:
    """Category listings and the all-categories overview."""

    def __init__(self, scanner: CorpusScanner, *, scheme: str = DEFAULT_SCHEME) -> None:
        self.scanner = scanner
        self.scheme = scheme

    def _summarize(self, document: Document, category: Category) -> DocumentSummary:
        return DocumentSummary(
            identifier=document.identifier,
            title=extract_title(document.text),
            description=extract_description(document.text, document.identifier),
            uri=build_reference(document.identifier, self.scheme),
            category=category,
        )

    def browse(self, category: str | Category) -> List[DocumentSummary]:
        """Documents classified into ``category``, in scan order.

        An empty list means the category has no documents; it is not an error.
        """
        wanted = Category(category)
        if wanted is Category.OTHER:
            raise ValueError(f"Unknown category: {category!r}")
        return [
            self._summarize(document, wanted)
            for document in self.scanner.iter_documents()
            if classify(document.identifier) is wanted
        ]

    def overview(self, *, sample: int = OVERVIEW_SAMPLE) -> List[CategoryGroup]:
        """Non-empty real categories with up to ``sample`` documents each."""
        grouped: Dict[Category, List[DocumentSummary]] = {category: [] for category in Category.real()}
        for document in self.scanner.iter_documents():
            category = classify(document.identifier)
            if category in grouped:
                grouped[category].append(self._summarize(document, category))

        return [
            CategoryGroup(category=category, total=len(documents), documents=documents[:sample])
            for category, documents in grouped.items()
            if documents
        ]
