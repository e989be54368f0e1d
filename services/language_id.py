"""Language identification for OCR output.

``detect_language`` runs a first OCR pass with every candidate language
loaded, then decides which single candidate the text is written in:

1. empty text answers the first candidate with zero confidence;
2. text shorter than ``Settings.min_text_length`` falls back to the
   dominant Unicode script;
3. otherwise the statistical classifier guesses, restricted to the
   candidates, and the confusion resolvers refine its answer;
4. an answer that maps to no candidate falls back to the script heuristic.

Fallback results carry ``short_text=True`` so callers can flag them as
uncertain.
"""

from __future__ import annotations

import inspect
import logging
import math
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Callable, Iterable, Iterator, Optional, Union

from core.confusion.cascade import run_cascade
from core.correlation import get_request_id, new_request_id, set_request_id
from core.lang_detect import ClassifierFn, statistically_classify
from core.languages import language_for_taxonomy, resolve_candidates
from core.scripts import match_candidate_by_script
from core.settings import Settings, get_settings
from observability.metrics import LANGUAGE_DETECTIONS, OCR_FAILURES, timed_stage
from services.ocr.base import OCRResult
from text.normalize import normalize_text

logger = logging.getLogger(__name__)

SOURCE_EMPTY = "empty"
SOURCE_SCRIPT = "script"
SOURCE_STATISTICAL = "statistical"

ExtractFn = Callable[[bytes, str], OCRResult]
AsyncExtractFn = Callable[[bytes, str], Union[OCRResult, Awaitable[OCRResult]]]


class LanguageDetectionError(RuntimeError):
    """Raised when the OCR pass feeding detection fails."""


@dataclass(frozen=True)
class DetectedLanguage:
    language: str
    confidence: float
    short_text: bool
    source: str = SOURCE_STATISTICAL

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _clamp(confidence: Optional[float]) -> float:
    if confidence is None:
        return 0.0
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


@contextmanager
def _request_scope() -> Iterator[str]:
    current = get_request_id()
    if current:
        yield current
        return
    request_id = new_request_id()
    try:
        yield request_id
    finally:
        set_request_id(None)


def _result(
    language: str, confidence: float, short_text: bool, source: str
) -> DetectedLanguage:
    LANGUAGE_DETECTIONS.labels(source=source).inc()
    return DetectedLanguage(language, confidence, short_text, source)


@timed_stage("identify")
def identify_language(
    text: str,
    confidence: Optional[float],
    candidates: Optional[Iterable[str]] = None,
    *,
    classifier: Optional[ClassifierFn] = None,
    settings: Optional[Settings] = None,
) -> DetectedLanguage:
    """Identify the language of already extracted ``text``."""
    settings = settings or get_settings()
    codes = resolve_candidates(candidates)
    confidence = _clamp(confidence)
    text = normalize_text(text or "")

    if not text:
        logger.info("OCR returned no text; defaulting to %s", codes[0])
        return _result(codes[0], 0.0, True, SOURCE_EMPTY)

    if len(text) < settings.min_text_length:
        language = match_candidate_by_script(text, codes)
        logger.info(
            "Text too short (%d < %d); script fallback picked %s",
            len(text),
            settings.min_text_length,
            language,
        )
        return _result(language, confidence, True, SOURCE_SCRIPT)

    provisional = statistically_classify(
        text, codes, settings.min_text_length, classifier=classifier
    )
    refined = run_cascade(text, provisional, codes)
    language = language_for_taxonomy(refined, codes)
    if language is not None:
        logger.info(
            "Detected %s (classifier=%s refined=%s confidence=%.2f)",
            language,
            provisional,
            refined,
            confidence,
        )
        return _result(language, confidence, False, SOURCE_STATISTICAL)

    language = match_candidate_by_script(text, codes)
    logger.info("Classifier undecided; script fallback picked %s", language)
    return _result(language, confidence, True, SOURCE_SCRIPT)


def _hint(codes: Iterable[str]) -> str:
    return "+".join(codes)


def _ocr_failed(exc: Exception, hint: str) -> LanguageDetectionError:
    OCR_FAILURES.inc()
    logger.warning("OCR pass with %s failed: %s", hint, exc)
    return LanguageDetectionError(f"OCR failed during language detection: {exc}")


@timed_stage("detect")
def detect_language(
    image: bytes,
    candidates: Optional[Iterable[str]],
    extract: ExtractFn,
    *,
    classifier: Optional[ClassifierFn] = None,
    settings: Optional[Settings] = None,
) -> DetectedLanguage:
    """OCR ``image`` with every candidate loaded and identify its language.

    Raises:
        UnsupportedLanguageError: a candidate is not a registered code.
        LanguageDetectionError: the OCR pass failed.
    """
    codes = resolve_candidates(candidates)
    hint = _hint(codes)
    with _request_scope():
        try:
            ocr = extract(image, hint)
        except Exception as exc:
            raise _ocr_failed(exc, hint) from exc
        return identify_language(
            ocr.text, ocr.confidence, codes, classifier=classifier, settings=settings
        )


async def adetect_language(
    image: bytes,
    candidates: Optional[Iterable[str]],
    extract: AsyncExtractFn,
    *,
    classifier: Optional[ClassifierFn] = None,
    settings: Optional[Settings] = None,
) -> DetectedLanguage:
    """Async twin of :func:`detect_language`; awaits ``extract`` if needed."""
    codes = resolve_candidates(candidates)
    hint = _hint(codes)
    with _request_scope():
        try:
            ocr = extract(image, hint)
            if inspect.isawaitable(ocr):
                ocr = await ocr
        except Exception as exc:
            raise _ocr_failed(exc, hint) from exc
        return identify_language(
            ocr.text, ocr.confidence, codes, classifier=classifier, settings=settings
        )


__all__ = [
    "DetectedLanguage",
    "LanguageDetectionError",
    "identify_language",
    "detect_language",
    "adetect_language",
    "SOURCE_EMPTY",
    "SOURCE_SCRIPT",
    "SOURCE_STATISTICAL",
]
