"""Caller-owned OCR session.

A session wraps a single runner and serialises access to it; Tesseract
engines are not safe to drive from several threads at once. Sessions are
created with ``with OCRSession(...) as session:`` and closed by the caller.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from core.settings import Settings, get_settings
from services.ocr.base import OCRError, OCRResult, OCRRunner, OCRUnavailableError
from services.ocr.config import split_lang_string
from services.ocr.tesseract_runner import TesseractOCRRunner

logger = logging.getLogger(__name__)


def build_runner(settings: Optional[Settings] = None) -> OCRRunner:
    settings = settings or get_settings()
    backend = settings.ocr_backend
    if backend == "tesseract":
        return TesseractOCRRunner(tesseract_cmd=settings.tesseract_cmd)
    raise OCRUnavailableError(f"unknown OCR backend: {backend}")


class OCRSession:
    def __init__(
        self,
        runner: Optional[OCRRunner] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._runner = runner or build_runner(settings)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def backend_name(self) -> str:
        return self._runner.backend_name

    @property
    def closed(self) -> bool:
        return self._closed

    def extract_text(self, image: bytes, language_hint: str) -> OCRResult:
        """Run OCR on ``image`` with a ``+``-joined language hint."""
        if self._closed:
            raise OCRError("OCR session is closed")
        langs = split_lang_string(language_hint)
        with self._lock:
            return self._runner.run(image, langs=langs)

    def close(self) -> None:
        if not self._closed:
            logger.debug("closing %s OCR session", self.backend_name)
        self._closed = True

    def __enter__(self) -> "OCRSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["OCRSession", "build_runner"]
