"""Text helpers for previews and line context."""

from __future__ import annotations

from typing import List

ELLIPSIS = "..."


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, keeping empty trailing lines so numbering is stable."""
    return text.split("\n")


def context_block(lines: List[str], index: int, radius: int = 2) -> str:
    """Join the lines within ``radius`` of ``index``, clamped to the document."""
    start = max(0, index - radius)
    end = min(len(lines), index + radius + 1)
    return "\n".join(lines[start:end])
