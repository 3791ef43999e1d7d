"""Keyword search over the documentation corpus."""

from __future__ import annotations

import logging
from typing import List

from mcpdocs.corpus.classifier import classify
from mcpdocs.corpus.metadata import extract_title
from mcpdocs.corpus.references import DEFAULT_SCHEME, build_reference
from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.index.matches import find_matches
from mcpdocs.index.scoring import score_relevance
from mcpdocs.models import ALL_CATEGORIES, Category, SearchResult
from mcpdocs.utils.text import truncate

LOGGER = logging.getLogger(__name__)

PREVIEW_CHARS = 500


def parse_category_filter(value: str | Category) -> Category | None:
    """Translate a category filter into a Category, or None for "all"."""
    if value == ALL_CATEGORIES:
        return None
    try:
        category = Category(value)
    except ValueError:
        raise ValueError(f"Unknown category: {value!r}") from None
    if category is Category.OTHER:
        raise ValueError(f"Unknown category: {value!r}")
    return category


class Searcher:
    """Rank corpus documents against a free-text query."""

    def __init__(self, scanner: CorpusScanner, *, scheme: str = DEFAULT_SCHEME) -> None:
        self.scanner = scanner
        self.scheme = scheme

    def search(self, query: str, *, category: str | Category = ALL_CATEGORIES) -> List[SearchResult]:
        wanted = parse_category_filter(category)
        results: List[SearchResult] = []
        for document in self.scanner.iter_documents():
            doc_category = classify(document.identifier)
            if wanted is not None and doc_category is not wanted:
                continue

            relevance = score_relevance(document.text, query)
            if relevance <= 0:
                continue

            results.append(
                SearchResult(
                    identifier=document.identifier,
                    title=extract_title(document.text),
                    preview=truncate(document.text, PREVIEW_CHARS),
                    category=doc_category,
                    relevance=relevance,
                    uri=build_reference(document.identifier, self.scheme),
                    matches=find_matches(document.text, query),
                )
            )

        # sort() is stable, so equal scores keep scan order
        results.sort(key=lambda result: result.relevance, reverse=True)
        LOGGER.debug("Query %r matched %d documents", query, len(results))
        return results
