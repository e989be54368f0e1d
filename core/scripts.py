"""Dominant-script heuristics used as a cheap language fallback."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from core.languages import ARABIC, JAPANESE, KOREAN, RUSSIAN, THAI, ScriptTag

# Enumeration order doubles as the tie-break: the first bucket reaching the
# maximum count wins.
_SCRIPT_RANGES: Tuple[Tuple[ScriptTag, Tuple[Tuple[int, int], ...]], ...] = (
    (ScriptTag.LATIN, ((0x0041, 0x005A), (0x0061, 0x007A))),
    (ScriptTag.CYRILLIC, ((0x0400, 0x04FF), (0x0500, 0x052F))),
    (ScriptTag.ARABIC, ((0x0600, 0x06FF),)),
    (ScriptTag.CJK, ((0x3040, 0x30FF), (0x4E00, 0x9FFF))),
    (ScriptTag.HANGUL, ((0xAC00, 0xD7AF),)),
    (ScriptTag.THAI, ((0x0E00, 0x0E7F),)),
)

_NON_LATIN_SCRIPTS: Dict[str, ScriptTag] = {
    RUSSIAN: ScriptTag.CYRILLIC,
    ARABIC: ScriptTag.ARABIC,
    KOREAN: ScriptTag.HANGUL,
    JAPANESE: ScriptTag.CJK,
    THAI: ScriptTag.THAI,
}


def _bucket(ch: str) -> ScriptTag:
    o = ord(ch)
    for script, ranges in _SCRIPT_RANGES:
        for start, end in ranges:
            if start <= o <= end:
                return script
    return ScriptTag.UNKNOWN


def script_counts(text: str) -> Dict[ScriptTag, int]:
    counts = {script: 0 for script, _ in _SCRIPT_RANGES}
    for ch in text:
        bucket = _bucket(ch)
        if bucket is not ScriptTag.UNKNOWN:
            counts[bucket] += 1
    return counts


def classify_script(text: str) -> ScriptTag:
    """Return the script with the most characters in ``text``.

    Digits, punctuation and characters outside the six recognised blocks are
    ignored; ``ScriptTag.UNKNOWN`` is returned when nothing is recognised.
    """
    best = ScriptTag.UNKNOWN
    best_count = 0
    for script, count in script_counts(text).items():
        if count > best_count:
            best, best_count = script, count
    return best


def script_for_language(code: str) -> ScriptTag:
    return _NON_LATIN_SCRIPTS.get(code, ScriptTag.LATIN)


def match_candidate_by_script(text: str, candidates: Sequence[str]) -> str:
    """Pick the first candidate written in the dominant script of ``text``.

    Falls back to the first candidate when no candidate shares the script.
    """
    script = classify_script(text)
    for code in candidates:
        if script_for_language(code) is script:
            return code
    return candidates[0]


__all__ = [
    "script_counts",
    "classify_script",
    "script_for_language",
    "match_candidate_by_script",
]
