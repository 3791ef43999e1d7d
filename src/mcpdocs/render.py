"""Markdown text payloads for search, category and overview responses."""

from __future__ import annotations

from typing import Dict, List, Sequence

from mcpdocs.corpus.classifier import subcategory
from mcpdocs.models import ALL_CATEGORIES, Category, CategoryGroup, DocumentSummary, SearchResult
from mcpdocs.utils.text import truncate

MATCHES_SHOWN = 3
MATCH_TEXT_CHARS = 100

CATEGORY_TITLES = {
    Category.GETTING_STARTED: "Getting Started with MCP",
    Category.CONCEPTS: "MCP Core Concepts",
    Category.DEVELOPMENT: "MCP Development",
    Category.SPECIFICATION: "Protocol Specification",
    Category.TOOLS: "Tools & Debugging",
    Category.COMMUNITY: "Community & Governance",
}

CATEGORY_DESCRIPTIONS = {
    Category.GETTING_STARTED: "Introduction and basics",
    Category.CONCEPTS: "Architecture and design principles",
    Category.DEVELOPMENT: "Building servers and clients",
    Category.SPECIFICATION: "Technical protocol details",
    Category.TOOLS: "Development tools and debugging",
    Category.COMMUNITY: "Governance and contribution guidelines",
}


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def category_values() -> str:
    return ", ".join(category.value for category in Category.real())


def format_no_results(query: str, category: str = ALL_CATEGORIES) -> str:
    scope = f' in category "{category}"' if category != ALL_CATEGORIES else ""
    return (
        f'No documentation found matching "{query}"{scope}.\n\n'
        "Try:\n"
        "- Using different keywords\n"
        '- Searching in "all" categories\n'
        "- Using broader search terms\n"
        "- Checking spelling\n\n"
        f"Available categories: {category_values()}"
    )


def format_search_results(
    query: str,
    results: Sequence[SearchResult],
    *,
    category: str = ALL_CATEGORIES,
    limit: int = 10,
) -> str:
    if not results:
        return format_no_results(query, category)

    lines: List[str] = [f'# Search Results for "{query}"', ""]
    found = f"Found {_plural(len(results), 'relevant document')}"
    if category != ALL_CATEGORIES:
        found += f' in category "{category}"'
    lines += [found + ":", ""]

    for rank, result in enumerate(results[:limit], start=1):
        lines.append(f"## {rank}. {result.title}")
        lines.append(
            f"**File**: `{result.identifier}` | **Category**: {result.category.value} "
            f"| **Relevance**: {result.relevance:.0f}"
        )
        lines.append("")
        if result.matches:
            lines.append("**Key matches:**")
            for match in result.matches[:MATCHES_SHOWN]:
                lines.append(f'- Line {match.line}: "{truncate(match.text, MATCH_TEXT_CHARS)}"')
            lines.append("")
        lines.append(f"**Preview**: {result.preview}")
        lines.append("")
        lines.append(f"**Access full document**: `{result.uri}`")
        lines += ["", "---", ""]

    if len(results) > limit:
        lines.append(
            f"*Showing top {limit} results. {len(results) - limit} additional documents found.*"
        )
    return "\n".join(lines).rstrip() + "\n"


def format_empty_category(category: Category) -> str:
    listing = "\n".join(
        f"- {item.value}: {CATEGORY_DESCRIPTIONS[item]}" for item in Category.real()
    )
    return f'No documentation found in category "{category.value}".\n\nAvailable categories:\n{listing}'


def format_category(category: Category, documents: Sequence[DocumentSummary]) -> str:
    if not documents:
        return format_empty_category(category)

    lines: List[str] = [f"# {CATEGORY_TITLES[category]}", ""]
    lines += [f"## {_plural(len(documents), 'Document')} Available", ""]

    groups: Dict[str, List[DocumentSummary]] = {}
    for document in documents:
        groups.setdefault(subcategory(category, document.identifier), []).append(document)

    for label, members in groups.items():
        if len(groups) > 1:
            lines += [f"### {label}", ""]
        for document in members:
            lines.append(f"#### {document.title}")
            lines.append(document.description)
            lines.append("")
            lines.append(f"**Resource**: `{document.uri}`")
            lines.append(f"**File**: `{document.identifier}`")
            lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def format_overview(groups: Sequence[CategoryGroup]) -> str:
    lines: List[str] = ["# MCP Documentation Overview", "", "## Available Documentation Categories", ""]
    for group in groups:
        lines.append(
            f"### {CATEGORY_TITLES[group.category]} - {CATEGORY_DESCRIPTIONS[group.category]}"
        )
        lines.append(f"*{_plural(group.total, 'document')} available*")
        lines.append("")
        for document in group.documents:
            lines.append(f"- **{document.title}** - {document.description}")
            lines.append(f"  *Resource*: `{document.uri}`")
        if group.remaining > 0:
            lines.append(f"  *... and {group.remaining} more documents*")
        lines.append("")

    if not groups:
        lines += ["*No documentation available.*", ""]
    return "\n".join(lines).rstrip() + "\n"
