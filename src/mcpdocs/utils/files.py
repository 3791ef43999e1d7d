"""Utility helpers for working with files."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

UNSAFE_FRAGMENTS = ("..", "/", "\\", "\0")


def iter_document_paths(root: Path, extension: str = ".md") -> Iterator[Path]:
    """Yield files directly under ``root`` whose name ends with ``extension``.

    Subdirectories are not descended into.
    """
    for child in sorted(root.iterdir()):
        if child.name.endswith(extension) and child.is_file():
            yield child


def is_safe_identifier(identifier: str, extension: str = ".md") -> bool:
    """Check that ``identifier`` is a bare file name with the expected extension."""
    if not identifier or not identifier.endswith(extension):
        return False
    return not any(fragment in identifier for fragment in UNSAFE_FRAGMENTS)


def format_mtime(mtime: float) -> str:
    """Render a POSIX timestamp as ISO-8601 UTC with millisecond precision."""
    stamp = datetime.fromtimestamp(mtime, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")
