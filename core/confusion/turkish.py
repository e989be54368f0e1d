"""Turkish against Finnish."""

from __future__ import annotations

import logging
from typing import Sequence

from core.confusion import markers as m
from core.confusion.signals import (
    count_all,
    count_matches,
    letter_frequency_bonus,
    never_raises,
)
from core.languages import FINNISH, INDONESIAN, TURKISH, taxonomy_code

logger = logging.getLogger(__name__)

NAME = "turkish"

TR = taxonomy_code(TURKISH)
FI = taxonomy_code(FINNISH)


def turkish_score(text: str, provisional: str) -> float:
    lower = text.lower()
    score = count_all(m.TURKISH_WORDS, lower) * 3.0
    score += count_all(m.TURKISH_PATTERNS, lower) * 2.0
    score += letter_frequency_bonus(
        lower,
        m.TURKISH_LETTERS,
        low_ratio=0.3,
        high_ratio=0.6,
        low_bonus=3.0,
        high_bonus=4.0,
    )

    letters = count_matches(m.TURKISH_DIACRITICS, lower)
    score += letters * 3.0
    if letters >= 5:
        score += 5.0
    endings = count_matches(m.TURKISH_ENDINGS, lower)
    score += endings * 2.5
    vocabulary = count_matches(m.TURKISH_VOCABULARY, lower)
    score += vocabulary * 4.0

    families = sum((letters > 2, endings > 0, vocabulary > 0))
    if families >= 3:
        score += 8.0
    elif families == 2:
        score += 5.0
    if provisional == TR:
        score += 5.0
    elif provisional == FI and families >= 2:
        score += 6.0
    return score


def _finnish_signals(lower: str):
    """Return ``(total, strong)`` Finnish marker counts."""
    strong = (
        count_matches(m.FINNISH_CASE_ENDINGS, lower)
        + count_matches(m.FINNISH_POSSESSIVES, lower)
        + count_matches(m.FINNISH_DOUBLED, lower)
    )
    return count_matches(m.FINNISH_VOCABULARY, lower) + strong, strong


@never_raises
def resolve(text: str, provisional: str, candidates: Sequence[str]) -> str:
    if TURKISH not in candidates or provisional not in (FI, TR):
        return provisional

    lower = text.lower()
    score = turkish_score(text, provisional)
    finnish_total, finnish_strong = _finnish_signals(lower)
    strong_finnish = finnish_strong >= 3

    if provisional == FI and not strong_finnish:
        if finnish_total == 0 and score > 0:
            score += 6.0
        if finnish_total < 2 and score >= 8:
            score += 4.0

    if INDONESIAN in candidates:
        frames = count_matches(m.INDONESIAN_YANG, lower) + count_matches(
            m.INDONESIAN_ADALAH, lower
        )
        if frames >= 2:
            logger.debug("Indonesian frames (%d) keep %s", frames, provisional)
            return provisional

    if strong_finnish and FINNISH in candidates and provisional == FI:
        logger.debug("Finnish markers (%d) keep %s", finnish_strong, provisional)
        return provisional

    threshold = 5.0 if provisional == FI else 10.0
    if score >= threshold:
        if provisional != TR:
            logger.info(
                "Turkish refinement %s -> %s (score=%.1f threshold=%.1f)",
                provisional,
                TR,
                score,
                threshold,
            )
        return TR
    return provisional


__all__ = ["NAME", "turkish_score", "resolve"]
