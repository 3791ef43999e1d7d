"""Filename-based document classification."""

from __future__ import annotations

from typing import Sequence, Tuple

from mcpdocs.models import Category

# Order matters: the first rule whose keyword appears in the identifier wins,
# and rules frequently co-match (e.g. "build-server.md").
RULES: Sequence[Tuple[Tuple[str, ...], Category]] = (
    (("getting-started", "intro"), Category.GETTING_STARTED),
    (("concepts", "learn", "architecture"), Category.CONCEPTS),
    (("develop", "build", "connect"), Category.DEVELOPMENT),
    (("basic", "server", "client", "specification"), Category.SPECIFICATION),
    (("tools", "debugging", "inspector"), Category.TOOLS),
    (("community", "governance", "communication"), Category.COMMUNITY),
)

PRIORITIES = {
    Category.GETTING_STARTED: 1.0,
    Category.CONCEPTS: 0.9,
    Category.DEVELOPMENT: 0.8,
    Category.SPECIFICATION: 0.7,
    Category.TOOLS: 0.6,
    Category.COMMUNITY: 0.5,
    Category.OTHER: 0.3,
}

SUBCATEGORY_RULES = {
    Category.CONCEPTS: (
        ("architecture", "Architecture"),
        ("tools", "Tools"),
        ("resources", "Resources"),
        ("prompts", "Prompts"),
        ("transports", "Transports"),
    ),
    Category.DEVELOPMENT: (
        ("server", "Server Development"),
        ("client", "Client Development"),
        ("connect", "Connection Setup"),
    ),
    Category.SPECIFICATION: (
        ("basic", "Base Protocol"),
        ("server", "Server Features"),
        ("client", "Client Features"),
    ),
}

GENERAL_SUBCATEGORY = "General"


def classify(identifier: str) -> Category:
    """Map a document identifier to its category."""
    for keywords, category in RULES:
        if any(keyword in identifier for keyword in keywords):
            return category
    return Category.OTHER


def priority(category: Category) -> float:
    return PRIORITIES.get(category, PRIORITIES[Category.OTHER])


def subcategory(category: Category, identifier: str) -> str:
    """Finer grouping used when listing a single category."""
    for keyword, label in SUBCATEGORY_RULES.get(category, ()):
        if keyword in identifier:
            return label
    return GENERAL_SUBCATEGORY
