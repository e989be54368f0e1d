"""Scoring primitives shared by the confusion resolvers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Iterable, Mapping, Pattern, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedPattern:
    pattern: Pattern[str]
    weight: float = 1.0


def rx(source: str) -> Pattern[str]:
    # Case-sensitive: callers lower-case the text first, and IGNORECASE
    # would let the dotless "ı" match a plain "i".
    return re.compile(source)


def words(*alternatives: str) -> str:
    """Regex source matching any of ``alternatives`` as whole words.

    Multi-word phrases may use ``\\s+`` between their parts.
    """
    unique = list(dict.fromkeys(alternatives))
    return r"\b(?:" + "|".join(unique) + r")\b"


def weighted(weight: float, *sources: str) -> Tuple[WeightedPattern, ...]:
    return tuple(WeightedPattern(rx(source), weight) for source in sources)


def count_matches(pattern: Pattern[str], text: str) -> int:
    """Number of non-overlapping matches; a failing pattern counts as none."""
    try:
        return sum(1 for _ in pattern.finditer(text))
    except (re.error, TypeError) as exc:
        logger.warning("Pattern %r failed: %s", getattr(pattern, "pattern", pattern), exc)
        return 0


def count_all(patterns: Iterable[Pattern[str]], text: str) -> int:
    return sum(count_matches(p, text) for p in patterns)


def present_count(patterns: Iterable[Pattern[str]], text: str) -> int:
    """Number of distinct patterns with at least one match."""
    return sum(1 for p in patterns if count_matches(p, text) > 0)


def weighted_score(patterns: Iterable[WeightedPattern], text: str) -> float:
    return sum(count_matches(wp.pattern, text) * wp.weight for wp in patterns)


def letter_frequency_bonus(
    text: str,
    expected: Mapping[str, float],
    *,
    low_ratio: float,
    high_ratio: float,
    low_bonus: float,
    high_bonus: float,
) -> float:
    """Reward diagnostic letters whose observed frequency nears the expected one.

    ``low_bonus`` is awarded when the observed frequency exceeds
    ``low_ratio * expected`` and ``high_bonus`` on top of it when it reaches
    ``high_ratio * expected``.
    """
    text = text.lower()
    length = len(text)
    if not length:
        return 0.0
    bonus = 0.0
    for letter, freq in expected.items():
        observed = text.count(letter) / length
        if observed > freq * low_ratio:
            bonus += low_bonus
        if observed >= freq * high_ratio:
            bonus += high_bonus
    return bonus


Resolver = Callable[[str, str, Sequence[str]], str]


def never_raises(func: Resolver) -> Resolver:
    """Keep the provisional code when a resolver blows up."""

    @wraps(func)
    def wrapper(text: str, provisional: str, candidates: Sequence[str]) -> str:
        try:
            return func(text, provisional, candidates)
        except Exception:
            logger.exception(
                "Resolver %s failed; keeping %s", func.__module__, provisional
            )
            return provisional

    return wrapper


__all__ = [
    "Resolver",
    "never_raises",
    "WeightedPattern",
    "rx",
    "words",
    "weighted",
    "count_matches",
    "count_all",
    "present_count",
    "weighted_score",
    "letter_frequency_bonus",
]
