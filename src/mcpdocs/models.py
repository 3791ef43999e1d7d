"""Core mcpdocs data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class Category(str, Enum):
    """Closed documentation taxonomy, plus the ``other`` bucket."""

    GETTING_STARTED = "getting_started"
    CONCEPTS = "concepts"
    DEVELOPMENT = "development"
    SPECIFICATION = "specification"
    TOOLS = "tools"
    COMMUNITY = "community"
    OTHER = "other"

    @classmethod
    def real(cls) -> List["Category"]:
        """The six browsable categories, in priority order."""
        return [category for category in cls if category is not cls.OTHER]


ALL_CATEGORIES = "all"
OVERVIEW = "overview"


@dataclass(slots=True)
class Document:
    """A corpus document as read from disk."""

    identifier: str
    text: str
    modified_at: datetime


@dataclass(slots=True)
class Match:
    line: int
    text: str
    context: str


@dataclass(slots=True)
class SearchResult:
    identifier: str
    title: str
    preview: str
    category: Category
    relevance: float
    uri: str
    matches: List[Match] = field(default_factory=list)


@dataclass(slots=True)
class DocumentSummary:
    """Title, description and reference of a classified document."""

    identifier: str
    title: str
    description: str
    uri: str
    category: Category


@dataclass(slots=True)
class CategoryGroup:
    """Overview entry: a category with its first few documents."""

    category: Category
    total: int
    documents: List[DocumentSummary]

    @property
    def remaining(self) -> int:
        return self.total - len(self.documents)


@dataclass(slots=True)
class ResourceDescriptor:
    uri: str
    name: str
    description: str
    mime_type: str
    audience: List[str]
    priority: float
    last_modified: str


@dataclass(slots=True)
class ResourceContent:
    uri: str
    mime_type: str
    text: str
    last_modified: str
