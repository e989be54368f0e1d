"""Danish / Swedish / Norwegian disambiguation."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from core.confusion.markers import DANISH as DANISH_MARKERS
from core.confusion.markers import NORWEGIAN as NORWEGIAN_MARKERS
from core.confusion.markers import SWEDISH as SWEDISH_MARKERS
from core.confusion.markers import ScandinavianMarkers
from core.confusion.signals import (
    letter_frequency_bonus,
    never_raises,
    present_count,
    weighted_score,
)
from core.languages import DANISH, NORWEGIAN, SWEDISH, get_language

logger = logging.getLogger(__name__)

NAME = "scandinavian"

_LANGUAGES: Tuple[Tuple[str, ScandinavianMarkers], ...] = (
    (DANISH, DANISH_MARKERS),
    (SWEDISH, SWEDISH_MARKERS),
    (NORWEGIAN, NORWEGIAN_MARKERS),
)

MIN_SCORE = 3.0
MIN_MARGIN = 2.0
STATISTICAL_BONUS = 3.0
INDICATOR_WEIGHT = 1.5


def _provisional_language(provisional: str) -> Optional[str]:
    for code, _ in _LANGUAGES:
        if get_language(code).matches(provisional):
            return code
    return None


def score_language(
    text: str, code: str, markers: ScandinavianMarkers, provisional: str
) -> float:
    lower = text.lower()
    score = weighted_score(markers.words, lower)
    score += weighted_score(markers.patterns, lower)
    if markers.indicator_bonus:
        distinct = present_count(markers.indicators, lower)
        if distinct >= 3:
            score += distinct * 2.0
    score += letter_frequency_bonus(
        lower,
        markers.letters,
        low_ratio=0.5,
        high_ratio=0.8,
        low_bonus=1.0,
        high_bonus=0.5,
    )
    if get_language(code).matches(provisional):
        score += STATISTICAL_BONUS
    return score


def _apply_indicators(text: str, scores: Dict[str, float]) -> None:
    lower = text.lower()
    for code, markers in _LANGUAGES:
        count = present_count(markers.indicators, lower)
        if count < 2:
            continue
        for other in scores:
            if other != code and scores[other] > 0:
                scores[other] = max(0.0, scores[other] - count * INDICATOR_WEIGHT)
        if count >= 3 and code in scores:
            scores[code] += count * INDICATOR_WEIGHT


@never_raises
def resolve(text: str, provisional: str, candidates: Sequence[str]) -> str:
    """Re-rank the Scandinavian candidates when the classifier picked one of them.

    Only candidate languages are scored. The provisional answer is replaced
    when the winner has at least ``MIN_SCORE`` points and leads the runner-up
    by ``MIN_MARGIN``.
    """
    scored = [(code, markers) for code, markers in _LANGUAGES if code in candidates]
    if not scored:
        return provisional
    original = _provisional_language(provisional)
    if original is None:
        return provisional

    scores: Dict[str, float] = {
        code: score_language(text, code, markers, provisional) for code, markers in scored
    }
    _apply_indicators(text, scores)

    ranked: List[Tuple[str, float]] = sorted(
        scores.items(), key=lambda item: item[1], reverse=True
    )
    best, best_score = ranked[0]
    runner_up = ranked[1][1] if len(ranked) > 1 else 0.0
    margin = best_score - runner_up

    if best_score >= MIN_SCORE and margin >= MIN_MARGIN and best != original:
        refined = get_language(best).taxonomy
        logger.info(
            "Scandinavian refinement %s -> %s (score=%.1f margin=%.1f)",
            provisional,
            refined,
            best_score,
            margin,
        )
        return refined
    logger.debug("Scandinavian scores %s; keeping %s", scores, provisional)
    return provisional


__all__ = ["NAME", "resolve", "score_language"]
