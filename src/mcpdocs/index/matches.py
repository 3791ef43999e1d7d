"""Line-level match extraction with surrounding context."""

from __future__ import annotations

from typing import List

from mcpdocs.models import Match
from mcpdocs.utils.text import context_block, split_lines

MAX_MATCHES = 5
CONTEXT_LINES = 2


def find_matches(text: str, query: str, *, limit: int = MAX_MATCHES) -> List[Match]:
    """Return up to ``limit`` lines containing ``query``, case-insensitively."""
    query_lower = query.lower()
    if not query_lower:
        return []

    lines = split_lines(text)
    matches: List[Match] = []
    for index, line in enumerate(lines):
        if query_lower not in line.lower():
            continue
        matches.append(
            Match(
                line=index + 1,
                text=line.strip(),
                context=context_block(lines, index, CONTEXT_LINES),
            )
        )
        if len(matches) >= limit:
            break
    return matches
