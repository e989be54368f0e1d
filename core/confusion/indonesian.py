"""Indonesian against Finnish and Turkish.

Guards run before and after scoring so that strong Finnish or Turkish
evidence always keeps the classifier's answer. This resolver only ever
answers Indonesian or the provisional code.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.confusion import markers as m
from core.confusion.signals import count_all, count_matches, never_raises
from core.languages import FINNISH, INDONESIAN, TURKISH, taxonomy_code

logger = logging.getLogger(__name__)

NAME = "indonesian"

ID = taxonomy_code(INDONESIAN)
FI = taxonomy_code(FINNISH)
TR = taxonomy_code(TURKISH)

CONFUSED = frozenset({FI, TR})


def _finnish_strong(lower: str) -> int:
    return (
        count_matches(m.FINNISH_CASE_ENDINGS, lower)
        + count_matches(m.FINNISH_POSSESSIVES, lower)
        + count_matches(m.FINNISH_DOUBLED, lower)
    )


def _turkish_counts(lower: str):
    """Return ``(words, letters, endings)`` Turkish marker counts."""
    return (
        count_matches(m.TURKISH_CROSS_CHECK_WORDS, lower),
        count_matches(m.TURKISH_DIACRITICS, lower),
        count_matches(m.TURKISH_ENDINGS, lower),
    )


def _competitor_guard(lower: str, candidates: Sequence[str]) -> bool:
    if FINNISH in candidates:
        finnish = count_matches(m.FINNISH_VOCABULARY, lower) + _finnish_strong(lower)
        if finnish >= 3:
            logger.debug("Finnish markers (%d) block Indonesian", finnish)
            return True
    if TURKISH in candidates:
        words, letters, endings = _turkish_counts(lower)
        if letters >= 3 or (words + letters + endings >= 5 and letters >= 1):
            logger.debug("Turkish letters (%d) block Indonesian", letters)
            return True
    return False


def indonesian_score(text: str, provisional: str) -> float:
    lower = text.lower()
    score = count_all(m.INDONESIAN_WORDS, lower) * 3.0
    score += count_all(m.INDONESIAN_PATTERNS, lower) * 2.5

    suffixes = count_matches(m.INDONESIAN_SUFFIXES, lower)
    yang = count_matches(m.INDONESIAN_YANG, lower)
    adalah = count_matches(m.INDONESIAN_ADALAH, lower)
    score += suffixes * 2.5 + yang * 4.0 + adalah * 3.0

    if sum((yang > 0, adalah > 0, suffixes > 2)) >= 2:
        score += 5.0
    if provisional == ID:
        score += 5.0
    return score


def _absence_bonus(lower: str, score: float, provisional: str) -> float:
    if provisional == FI:
        finnish = count_all(
            (
                m.FINNISH_VOCABULARY,
                m.FINNISH_CASE_ENDINGS,
                m.FINNISH_POSSESSIVES,
                m.FINNISH_DOUBLED,
            ),
            lower,
        )
        if finnish == 0 and score > 0:
            score += 6.0
        if finnish < 2 and score >= 8:
            score += 4.0
    elif provisional == TR:
        words, letters, endings = _turkish_counts(lower)
        strong = count_matches(m.TURKISH_KEY_WORDS, lower) + letters
        if words + letters + endings == 0 and score > 0:
            score += 6.0
        if strong < 2 and score >= 8:
            score += 4.0
    return score


def _final_guard(lower: str, candidates: Sequence[str]) -> bool:
    if FINNISH in candidates and _finnish_strong(lower) >= 2:
        return True
    if TURKISH in candidates:
        words, letters, endings = _turkish_counts(lower)
        strong = words + letters
        if strong >= 3 or (strong + endings >= 5 and strong >= 1):
            return True
    return False


@never_raises
def resolve(text: str, provisional: str, candidates: Sequence[str]) -> str:
    if INDONESIAN not in candidates:
        return provisional
    if provisional not in CONFUSED and provisional != ID:
        return provisional

    lower = text.lower()
    if _competitor_guard(lower, candidates):
        return provisional

    score = _absence_bonus(lower, indonesian_score(text, provisional), provisional)

    if _final_guard(lower, candidates):
        logger.debug("Finnish or Turkish markers keep %s", provisional)
        return provisional

    threshold = 6.0 if provisional in CONFUSED else 10.0
    if score >= threshold:
        if provisional != ID:
            logger.info(
                "Indonesian refinement %s -> %s (score=%.1f threshold=%.1f)",
                provisional,
                ID,
                score,
                threshold,
            )
        return ID
    return provisional


__all__ = ["NAME", "indonesian_score", "resolve"]
