"""Heuristic keyword relevance scoring."""

from __future__ import annotations

import re

from mcpdocs.corpus.metadata import extract_title

TITLE_WEIGHT = 100
PHRASE_WEIGHT = 10
WORD_WEIGHT = 2
MIN_WORD_CHARS = 3

LONG_DOCUMENT_CHARS = 10000
SHORT_DOCUMENT_CHARS = 1000
LONG_DOCUMENT_FACTOR = 0.8
SHORT_DOCUMENT_FACTOR = 1.2


def score_relevance(text: str, query: str) -> float:
    """Score how well ``text`` matches ``query``; zero means no match at all.

    Combines a title hit, whole-phrase occurrences and whole-word occurrences
    of each query word, then favours short documents over long ones.
    """
    query_lower = query.lower()
    if not query_lower.strip():
        return 0.0
    text_lower = text.lower()

    score = 0.0
    if query_lower in extract_title(text).lower():
        score += TITLE_WEIGHT

    score += text_lower.count(query_lower) * PHRASE_WEIGHT

    for word in query_lower.split():
        if len(word) >= MIN_WORD_CHARS:
            pattern = re.compile(rf"\b{re.escape(word)}\b")
            score += len(pattern.findall(text_lower)) * WORD_WEIGHT

    if len(text) > LONG_DOCUMENT_CHARS:
        score *= LONG_DOCUMENT_FACTOR
    elif len(text) < SHORT_DOCUMENT_CHARS:
        score *= SHORT_DOCUMENT_FACTOR

    return score
