"""Tests for relevance scoring."""

from __future__ import annotations

import pytest

from mcpdocs.index.scoring import score_relevance

INTRO = "# Getting Started\n\nWelcome to the protocol.\n"
BUILD_SERVER = (
    "# Build a Server\n\n"
    "This guide walks through writing a server from scratch.\n"
    "Servers expose tools and resources.\n"
)


def _padded(body: str, length: int) -> str:
    text = "# Title\n" + body + "\n"
    return text + "z" * (length - len(text))


class TestScoreRelevance:
    """Tests for score_relevance."""

    def test_phrase_and_word(self) -> None:
        # one phrase hit (10) + one whole word hit (2), short document bonus
        assert score_relevance(INTRO, "welcome") == pytest.approx(14.4)

    def test_case_insensitive(self) -> None:
        assert score_relevance(INTRO, "WELCOME") == score_relevance(INTRO, "welcome")

    def test_title_match(self) -> None:
        # title (100) + phrase (10) + two words (2 + 2)
        assert score_relevance(INTRO, "Getting Started") == pytest.approx(136.8)

    def test_query_equal_to_title_scores_at_least_100(self) -> None:
        assert score_relevance(BUILD_SERVER, "Build a Server") >= 100

    def test_multi_word_query(self) -> None:
        # no phrase hit; "build" once, "server" twice as whole words
        assert score_relevance(BUILD_SERVER, "build server") == pytest.approx(7.2)

    def test_short_words_ignored(self) -> None:
        text = _padded("an of here", 2000)
        assert score_relevance(text, "an of") == pytest.approx(10)

    def test_whole_word_boundary(self) -> None:
        text = _padded("servers everywhere", 2000)
        # substring phrase hit only, no whole-word hit
        assert score_relevance(text, "server") == pytest.approx(10)

    def test_no_match(self) -> None:
        assert score_relevance(INTRO, "kubernetes") == 0

    @pytest.mark.parametrize("query", ["", "   "])
    def test_empty_query_scores_zero(self, query: str) -> None:
        assert score_relevance(INTRO, query) == 0

    def test_regex_characters_are_literal(self) -> None:
        text = _padded("use c++ here", 2000)
        assert score_relevance(text, "c++") == pytest.approx(10)

    @pytest.mark.parametrize(
        ("length", "expected"),
        [(500, 14.4), (1000, 12.0), (10000, 12.0), (10001, 9.6)],
    )
    def test_length_adjustment(self, length: int, expected: float) -> None:
        text = _padded("alpha", length)
        assert len(text) == length
        assert score_relevance(text, "alpha") == pytest.approx(expected)

    def test_monotonic_in_phrase_count(self) -> None:
        scores = [score_relevance(_padded("alpha " * count, 3000), "alpha") for count in range(6)]
        assert scores == sorted(scores)
        assert scores[0] == 0
