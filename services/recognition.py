from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from core.lang_detect import ClassifierFn
from core.languages import resolve_candidates
from core.settings import Settings, get_settings
from observability.metrics import timed_stage
from services.language_id import (
    DetectedLanguage,
    LanguageDetectionError,
    detect_language,
)
from services.ocr.config import split_lang_string, tesseract_lang_string
from services.ocr.session import OCRSession

logger = logging.getLogger(__name__)


@dataclass
class RecognitionResult:
    text: str
    language: str
    detected: Optional[DetectedLanguage]
    uncertain: bool
    empty: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "language": self.language,
            "detected": self.detected.as_dict() if self.detected else None,
            "uncertain": self.uncertain,
            "empty": self.empty,
        }


@timed_stage("recognize")
def recognize(
    image: bytes,
    session: OCRSession,
    *,
    candidates: Optional[Iterable[str]] = None,
    language: Optional[str] = None,
    classifier: Optional[ClassifierFn] = None,
    settings: Optional[Settings] = None,
) -> RecognitionResult:
    """Recognise the text of ``image`` in its own language.

    A user-chosen ``language`` skips detection. Otherwise the language is
    detected first and the picture is OCRed again with only that language.
    OCR errors of that second pass propagate.
    """
    settings = settings or get_settings()
    detected: Optional[DetectedLanguage] = None

    if language:
        ocr_language = tesseract_lang_string(
            resolve_candidates(split_lang_string(language))
        )
        uncertain = False
    else:
        try:
            detected = detect_language(
                image,
                candidates,
                session.extract_text,
                classifier=classifier,
                settings=settings,
            )
        except LanguageDetectionError as exc:
            logger.warning(
                "Language detection failed, using %s: %s",
                settings.default_ocr_language,
                exc,
            )
        if detected is not None:
            ocr_language = detected.language
            uncertain = detected.short_text
        else:
            ocr_language = settings.default_ocr_language
            uncertain = True

    result = session.extract_text(image, ocr_language)
    text = result.text.strip()
    if not text:
        logger.info("No text recognised with %s", ocr_language)
    return RecognitionResult(
        text=text,
        language=ocr_language,
        detected=detected,
        uncertain=uncertain,
        empty=not text,
    )


__all__ = ["RecognitionResult", "recognize"]
