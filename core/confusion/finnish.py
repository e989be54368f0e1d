"""Finnish against Turkish, Italian, Filipino and Indonesian.

The statistical classifier regularly mistakes short Finnish passages for one
of these languages. Finnish is recognised by three grammatical families: case
endings, possessive suffixes and doubled consonants. Competitor markers veto
or discount the override.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from core.confusion import markers as m
from core.confusion.signals import (
    count_all,
    count_matches,
    letter_frequency_bonus,
    never_raises,
    present_count,
)
from core.languages import (
    FILIPINO,
    FINNISH,
    INDONESIAN,
    ITALIAN,
    TURKISH,
    taxonomy_code,
)

logger = logging.getLogger(__name__)

NAME = "finnish"

FI = taxonomy_code(FINNISH)
TR = taxonomy_code(TURKISH)
IT = taxonomy_code(ITALIAN)
TL = taxonomy_code(FILIPINO)
ID = taxonomy_code(INDONESIAN)

CONFUSABLE = frozenset({TR, IT, TL, ID})
# Confusables that all three Finnish families beat before any veto is heard.
OUTRIGHT = frozenset({TL, ID})

BASE_THRESHOLDS = {ID: 4.0, TL: 3.0, TR: 7.0, IT: 6.0, FI: 10.0}


@dataclass
class FinnishEvidence:
    score: float
    families: int

    @property
    def strong(self) -> bool:
        return self.families >= 2

    @property
    def complete(self) -> bool:
        return self.families >= 3


def finnish_evidence(text: str, provisional: str) -> FinnishEvidence:
    lower = text.lower()
    score = count_all(m.FINNISH_WORDS, lower) * 3.0
    score += count_all(m.FINNISH_PATTERNS, lower) * 2.0
    score += letter_frequency_bonus(
        lower,
        m.FINNISH_LETTERS,
        low_ratio=0.3,
        high_ratio=0.6,
        low_bonus=2.0,
        high_bonus=3.0,
    )

    doubled = count_matches(m.FINNISH_DOUBLED, lower)
    case_endings = count_matches(m.FINNISH_CASE_ENDINGS, lower)
    possessives = count_matches(m.FINNISH_POSSESSIVES, lower)
    score += doubled * 2.0 + case_endings * 2.5 + possessives * 3.0

    families = sum(1 for n in (case_endings, possessives, doubled) if n > 0)
    if families >= 3:
        score += 5.0
    elif families == 2:
        score += 3.0
    if provisional == FI:
        score += 5.0
    return FinnishEvidence(score=score, families=families)


def _discount_turkish(lower: str, evidence: FinnishEvidence, provisional: str) -> None:
    strong = count_matches(m.TURKISH_KEY_WORDS, lower) + count_matches(
        m.TURKISH_EXCLUSIVE, lower
    )
    total = strong + count_matches(m.TURKISH_ENDINGS, lower)
    if strong >= 3 and not evidence.strong:
        evidence.score = max(0.0, evidence.score - strong * 0.8)
    elif total >= 8 and not evidence.strong:
        evidence.score = max(0.0, evidence.score - total * 0.3)
    elif provisional == TR and total == 0 and evidence.score > 0:
        evidence.score += 3.0


def _vetoed(
    lower: str,
    evidence: FinnishEvidence,
    provisional: str,
    candidates: Sequence[str],
) -> bool:
    if provisional == TL and not evidence.complete:
        if count_all(m.FILIPINO_STRONG, lower) >= 3:
            logger.debug("Filipino constructions keep %s", provisional)
            return True
    if provisional == ID and not evidence.complete:
        frames = count_matches(m.INDONESIAN_YANG, lower) + count_matches(
            m.INDONESIAN_ADALAH, lower
        )
        if frames >= 2:
            logger.debug("Indonesian frames keep %s", provisional)
            return True
    if provisional == IT and not evidence.complete:
        if present_count(m.ITALIAN_INDICATORS, lower) >= 2:
            logger.debug("Italian indicators keep %s", provisional)
            return True
    if provisional == TR or TURKISH in candidates:
        exclusive = count_matches(m.TURKISH_EXCLUSIVE, lower)
        key_words = count_matches(m.TURKISH_KEY_WORDS, lower)
        turkish = (
            count_matches(m.TURKISH_CROSS_CHECK_WORDS, lower)
            + count_matches(m.TURKISH_DIACRITICS, lower)
            + count_matches(m.TURKISH_ENDINGS, lower)
        )
        if exclusive >= 3 or (turkish >= 5 and exclusive + key_words >= 1):
            logger.debug("Turkish markers (%d) keep %s", turkish, provisional)
            return True
    return False


def _absence_bonus(lower: str, evidence: FinnishEvidence, provisional: str) -> None:
    if provisional == TL:
        filipino = count_all(m.FILIPINO_INDICATORS, lower)
        if filipino == 0 and evidence.score > 0:
            evidence.score += 8.0
        if filipino < 2 and evidence.score >= 5:
            evidence.score += 5.0
    elif provisional == ID:
        indonesian = count_all(
            (
                m.INDONESIAN_FUNCTION_WORDS,
                m.INDONESIAN_YANG,
                m.INDONESIAN_ADALAH,
                m.INDONESIAN_SUFFIXES,
            ),
            lower,
        )
        if indonesian == 0 and evidence.score > 0:
            evidence.score += 6.0
        if indonesian < 3 and evidence.score >= 8:
            evidence.score += 4.0


def threshold_for(provisional: str, strong: bool) -> float:
    base = BASE_THRESHOLDS.get(provisional, 10.0)
    if strong:
        return max(2.0, base - 2.0)
    return base


@never_raises
def resolve(text: str, provisional: str, candidates: Sequence[str]) -> str:
    if FINNISH not in candidates:
        return provisional
    if provisional not in CONFUSABLE and provisional != FI:
        return provisional

    lower = text.lower()
    evidence = finnish_evidence(text, provisional)
    _discount_turkish(lower, evidence, provisional)
    if provisional == IT and present_count(m.ITALIAN_INDICATORS, lower) == 0:
        if evidence.score > 0:
            evidence.score += 3.0

    if evidence.complete and provisional in OUTRIGHT:
        logger.info("All Finnish families present; %s -> %s", provisional, FI)
        return FI

    if _vetoed(lower, evidence, provisional, candidates):
        return provisional

    _absence_bonus(lower, evidence, provisional)

    if evidence.strong and provisional in (TR, TL):
        logger.info(
            "Finnish families (%d) override %s (score=%.1f)",
            evidence.families,
            provisional,
            evidence.score,
        )
        return FI

    threshold = threshold_for(provisional, evidence.strong)
    if evidence.score >= threshold:
        if provisional != FI:
            logger.info(
                "Finnish refinement %s -> %s (score=%.1f threshold=%.1f)",
                provisional,
                FI,
                evidence.score,
                threshold,
            )
        return FI
    return provisional


__all__ = [
    "NAME",
    "FinnishEvidence",
    "finnish_evidence",
    "threshold_for",
    "resolve",
]
