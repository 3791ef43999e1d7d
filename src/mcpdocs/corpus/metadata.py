"""Title and description extraction from raw document text."""

from __future__ import annotations

import re

from mcpdocs.utils.text import split_lines, truncate

H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)

FALLBACK_TITLE = "Untitled Document"
FALLBACK_DESCRIPTION = "MCP documentation and reference material"
DESCRIPTION_LIMIT = 150
MIN_DESCRIPTION_CHARS = 20
TITLE_SCAN_LINES = 10

BOILERPLATE_PREFIXES = ("[", "Version", "Search...", "Navigation", "On this page")

# Checked in order against the identifier when the body yields no description.
TOPIC_DESCRIPTIONS = (
    (("getting-started", "intro"), "Introduction and getting started guide for MCP development"),
    (("architecture",), "MCP architecture overview and core concepts"),
    (("build-server",), "Complete guide for building MCP servers"),
    (("build-client",), "Guide for building MCP clients and integrations"),
    (("tools",), "MCP tools specification and implementation guide"),
    (("resources",), "MCP resources specification and usage patterns"),
    (("prompts",), "MCP prompts specification and best practices"),
    (("transports",), "MCP transport mechanisms and protocol details"),
    (("security",), "Security best practices and considerations for MCP"),
    (("troubleshooting", "debugging"), "Troubleshooting guide and debugging techniques"),
)


def extract_title(text: str) -> str:
    """Return the first level-1 heading, else the first plausible line."""
    match = H1_PATTERN.search(text)
    if match:
        return match.group(1).strip()

    for line in split_lines(text)[:TITLE_SCAN_LINES]:
        if line.strip() and not line.startswith("[") and not line.startswith("Version"):
            return line.strip()

    return FALLBACK_TITLE


def extract_description(text: str, identifier: str) -> str:
    """Return the first substantial paragraph line after the main heading.

    Navigation chrome left behind by scraping (link rows, version pickers,
    "On this page" markers) is skipped. Documents without usable body text
    get a canned description chosen from the identifier.
    """
    description = ""
    in_content = False
    for line in split_lines(text):
        stripped = line.strip()
        if not stripped or stripped.startswith(BOILERPLATE_PREFIXES):
            continue
        if stripped.startswith("# "):
            in_content = True
            continue
        if stripped.startswith("#"):
            continue
        if in_content and len(stripped) > MIN_DESCRIPTION_CHARS:
            description = stripped
            break

    if not description:
        description = default_description(identifier)

    return truncate(description, DESCRIPTION_LIMIT)


def default_description(identifier: str) -> str:
    for keywords, description in TOPIC_DESCRIPTIONS:
        if any(keyword in identifier for keyword in keywords):
            return description
    return FALLBACK_DESCRIPTION
