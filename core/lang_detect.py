"""Statistical language classification helpers."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from langdetect.detector_factory import (  # type: ignore[import-untyped]
    PROFILES_DIRECTORY,
    DetectorFactory,
)
from langdetect.lang_detect_exception import (  # type: ignore[import-untyped]
    LangDetectException,
)

from core.languages import UNDETERMINED, get_language, language_for_taxonomy
from observability.metrics import CLASSIFIER_ERRORS

logger = logging.getLogger(__name__)

ClassifierFn = Callable[[str, Sequence[str], int], str]

_factory: Optional[DetectorFactory] = None


def _get_factory() -> DetectorFactory:
    global _factory
    if _factory is None:
        factory = DetectorFactory()
        factory.load_profile(PROFILES_DIRECTORY)
        factory.seed = 0
        _factory = factory
    return _factory


def reset_classifier() -> None:
    global _factory
    _factory = None


def classify_text(text: str, whitelist: Sequence[str], min_length: int) -> str:
    """Guess the language of ``text`` with langdetect.

    Only languages in ``whitelist`` can win: they receive a uniform prior and
    everything else a zero prior. Returns ``"und"`` for text shorter than
    ``min_length``. ``LangDetectException`` propagates to the caller.
    """
    if len(text) < min_length:
        return UNDETERMINED
    factory = _get_factory()
    detector = factory.create()
    known = set(factory.get_lang_list())
    allowed = [code for code in whitelist if code in known]
    if whitelist and not allowed:
        return UNDETERMINED
    if allowed:
        detector.set_prior_map({code: 1.0 for code in allowed})
    detector.append(text)
    code = detector.detect()
    if not code or code == "unknown":
        return UNDETERMINED
    return code


def build_whitelist(candidates: Iterable[str]) -> Tuple[str, ...]:
    """Map candidate language codes to classifier codes, de-duplicated."""
    ordered: List[str] = []
    for code in candidates:
        taxonomy = get_language(code).taxonomy
        if taxonomy not in ordered:
            ordered.append(taxonomy)
    return tuple(ordered)


def statistically_classify(
    text: str,
    candidates: Sequence[str],
    min_length: int,
    classifier: Optional[ClassifierFn] = None,
) -> str:
    """Run the statistical classifier restricted to ``candidates``.

    Returns the classifier's code, or ``"und"`` when the classifier fails or
    answers with a language no candidate maps to.
    """
    classify = classifier or classify_text
    whitelist = build_whitelist(candidates)
    try:
        code = classify(text, whitelist, min_length)
    except LangDetectException as exc:
        logger.warning("Statistical classifier gave up: %s", exc)
        CLASSIFIER_ERRORS.inc()
        return UNDETERMINED
    except Exception:
        logger.exception("Statistical classifier failed")
        CLASSIFIER_ERRORS.inc()
        return UNDETERMINED
    if not code or code == UNDETERMINED:
        return UNDETERMINED
    if language_for_taxonomy(code, candidates) is None:
        logger.info("Classifier answered %s, outside candidates %s", code, whitelist)
        return UNDETERMINED
    return code


__all__ = [
    "ClassifierFn",
    "classify_text",
    "build_whitelist",
    "statistically_classify",
    "reset_classifier",
]
