import re

import pytest

from core.confusion.signals import (
    WeightedPattern,
    count_all,
    count_matches,
    letter_frequency_bonus,
    never_raises,
    present_count,
    rx,
    weighted_score,
    words,
)


def test_words_matches_whole_words_only() -> None:
    pattern = rx(words("on", "ei", "on"))
    assert pattern.pattern == r"\b(?:on|ei)\b"
    assert count_matches(pattern, "hän on kotona eikä ei") == 2


def test_dotless_i_is_not_plain_i() -> None:
    assert count_matches(rx("[ı]"), "iiii") == 0
    assert count_matches(rx("[ı]"), "ıi") == 1


def test_counting_helpers() -> None:
    patterns = (rx(r"\bja\b"), rx(r"\bon\b"), rx(r"\bzz\b"))
    text = "ja ja on"
    assert count_all(patterns, text) == 3
    assert present_count(patterns, text) == 2
    weighted = (WeightedPattern(patterns[0], 2.0), WeightedPattern(patterns[1], 0.5))
    assert weighted_score(weighted, text) == pytest.approx(4.5)


def test_broken_pattern_counts_as_zero() -> None:
    assert count_matches(re.compile("a"), None) == 0  # type: ignore[arg-type]


def test_letter_frequency_bonus() -> None:
    expected = {"ä": 0.1}
    kwargs = dict(low_ratio=0.5, high_ratio=0.8, low_bonus=1.0, high_bonus=0.5)
    assert letter_frequency_bonus("ääaaaaaaaa", expected, **kwargs) == 1.5
    assert letter_frequency_bonus("ä" + "a" * 29, expected, **kwargs) == 0.0
    assert letter_frequency_bonus("", expected, **kwargs) == 0.0


def test_never_raises_returns_provisional() -> None:
    @never_raises
    def broken(text, provisional, candidates):
        raise KeyError("x")

    assert broken("text", "tl", ("fin",)) == "tl"
    assert broken.__name__ == "broken"
