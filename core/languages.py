"""Supported language registry.

Every language code the engine accepts lives here, together with the label
shown in a language picker, the script it is written in and its code in the
statistical classifier's taxonomy (ISO 639-1 as used by ``langdetect``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

UNDETERMINED = "und"


class ScriptTag(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    ARABIC = "arabic"
    CJK = "cjk"
    HANGUL = "hangul"
    THAI = "thai"
    UNKNOWN = "unknown"


class UnsupportedLanguageError(ValueError):
    """Raised when a caller passes a language code outside the registry."""


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    label: str
    script: ScriptTag
    taxonomy: str
    aliases: Tuple[str, ...] = ()

    def matches(self, taxonomy_code: str) -> bool:
        return taxonomy_code == self.taxonomy or taxonomy_code in self.aliases


ENGLISH = "eng"
RUSSIAN = "rus"
GERMAN = "deu"
FRENCH = "fra"
SPANISH = "spa"
ITALIAN = "ita"
DUTCH = "nld"
SWEDISH = "swe"
DANISH = "dan"
NORWEGIAN = "nor"
FINNISH = "fin"
ARABIC = "ara"
INDONESIAN = "ind"
PORTUGUESE = "por"
JAPANESE = "jpn"
FILIPINO = "fil"
VIETNAMESE = "vie"
TURKISH = "tur"
THAI = "tha"
KOREAN = "kor"

_LATIN = ScriptTag.LATIN

SUPPORTED_LANGUAGES: Tuple[LanguageInfo, ...] = (
    LanguageInfo(ENGLISH, "English", _LATIN, "en"),
    LanguageInfo(RUSSIAN, "Russian", ScriptTag.CYRILLIC, "ru"),
    LanguageInfo(GERMAN, "German", _LATIN, "de"),
    LanguageInfo(FRENCH, "French", _LATIN, "fr"),
    LanguageInfo(SPANISH, "Spanish", _LATIN, "es"),
    LanguageInfo(ITALIAN, "Italian", _LATIN, "it"),
    LanguageInfo(DUTCH, "Dutch", _LATIN, "nl"),
    LanguageInfo(SWEDISH, "Swedish", _LATIN, "sv"),
    LanguageInfo(DANISH, "Danish", _LATIN, "da"),
    # Bokmål and Nynorsk are both accepted as Norwegian.
    LanguageInfo(NORWEGIAN, "Norwegian", _LATIN, "no", ("nb", "nn", "nob", "nno")),
    LanguageInfo(FINNISH, "Finnish", _LATIN, "fi"),
    LanguageInfo(ARABIC, "Arabic", ScriptTag.ARABIC, "ar"),
    LanguageInfo(INDONESIAN, "Indonesian", _LATIN, "id"),
    LanguageInfo(PORTUGUESE, "Portuguese", _LATIN, "pt"),
    LanguageInfo(JAPANESE, "Japanese", ScriptTag.CJK, "ja"),
    LanguageInfo(FILIPINO, "Filipino", _LATIN, "tl"),
    LanguageInfo(VIETNAMESE, "Vietnamese", _LATIN, "vi"),
    LanguageInfo(TURKISH, "Turkish", _LATIN, "tr"),
    LanguageInfo(THAI, "Thai", ScriptTag.THAI, "th"),
    LanguageInfo(KOREAN, "Korean", ScriptTag.HANGUL, "ko"),
)

_BY_CODE: Dict[str, LanguageInfo] = {info.code: info for info in SUPPORTED_LANGUAGES}


def supported_codes() -> List[str]:
    return [info.code for info in SUPPORTED_LANGUAGES]


def list_supported_languages() -> List[Dict[str, str]]:
    """Return ``[{code, label}]`` entries for a language selection UI."""
    return [{"code": info.code, "label": info.label} for info in SUPPORTED_LANGUAGES]


def get_language(code: str) -> LanguageInfo:
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnsupportedLanguageError(f"unsupported language code: {code!r}") from None


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def language_label(code: Optional[str]) -> str:
    if code and code in _BY_CODE:
        return _BY_CODE[code].label
    return code or ""


def taxonomy_code(code: str) -> str:
    return get_language(code).taxonomy


def language_for_taxonomy(
    taxonomy: Optional[str], candidates: Iterable[str]
) -> Optional[str]:
    """Reverse lookup of a classifier code among the given candidates.

    Returns the first candidate whose registry entry maps to ``taxonomy``
    (aliases included) or ``None``.
    """
    if not taxonomy or taxonomy == UNDETERMINED:
        return None
    for code in candidates:
        info = _BY_CODE.get(code)
        if info is not None and info.matches(taxonomy):
            return code
    return None


def resolve_candidates(candidates: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Build the candidate set for one detection request.

    Order is preserved and duplicates are dropped. An empty input falls back
    to every registered language.
    """
    ordered: List[str] = []
    for code in candidates or ():
        code = code.strip()
        if not code:
            continue
        if code not in _BY_CODE:
            raise UnsupportedLanguageError(f"unsupported language code: {code!r}")
        if code not in ordered:
            ordered.append(code)
    if not ordered:
        return tuple(supported_codes())
    return tuple(ordered)


__all__ = [
    "UNDETERMINED",
    "ScriptTag",
    "UnsupportedLanguageError",
    "LanguageInfo",
    "SUPPORTED_LANGUAGES",
    "supported_codes",
    "list_supported_languages",
    "get_language",
    "is_supported",
    "language_label",
    "taxonomy_code",
    "language_for_taxonomy",
    "resolve_candidates",
    "ENGLISH",
    "RUSSIAN",
    "GERMAN",
    "FRENCH",
    "SPANISH",
    "ITALIAN",
    "DUTCH",
    "SWEDISH",
    "DANISH",
    "NORWEGIAN",
    "FINNISH",
    "ARABIC",
    "INDONESIAN",
    "PORTUGUESE",
    "JAPANESE",
    "FILIPINO",
    "VIETNAMESE",
    "TURKISH",
    "THAI",
    "KOREAN",
]
