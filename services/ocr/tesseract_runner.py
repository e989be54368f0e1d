from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

try:
    import pytesseract  # type: ignore[import-untyped]
except Exception:  # pragma: no cover
    pytesseract = None  # type: ignore[assignment]

from services.ocr.base import (
    OCRResult,
    OCRRunner,
    OCRRuntimeError,
    OCRUnavailableError,
)
from services.ocr.config import tesseract_lang_string

logger = logging.getLogger(__name__)


def _lines_from_data(data: dict[str, list[Any]]) -> tuple[list[str], list[float]]:
    """Rebuild text lines and collect word confidences from ``image_to_data``."""
    lines: dict[tuple[int, int, int], list[str]] = {}
    confidences: list[float] = []
    texts = data.get("text", [])
    for idx, raw in enumerate(texts):
        word = (raw or "").strip()
        if not word:
            continue
        key = (
            int(data.get("block_num", [0] * len(texts))[idx]),
            int(data.get("par_num", [0] * len(texts))[idx]),
            int(data.get("line_num", [0] * len(texts))[idx]),
        )
        lines.setdefault(key, []).append(word)
        try:
            conf = float(data.get("conf", [])[idx])
        except (IndexError, TypeError, ValueError):
            continue
        if conf >= 0:
            confidences.append(conf)
    return [" ".join(words) for _, words in sorted(lines.items())], confidences


class TesseractOCRRunner(OCRRunner):
    backend_name = "tesseract"

    def __init__(self, tesseract_cmd: Optional[str] = None) -> None:
        self.tesseract_cmd = tesseract_cmd

    def run(
        self,
        image_bytes: bytes,
        *,
        langs: Optional[Iterable[str]] = None,
        **_: object,
    ) -> OCRResult:
        if pytesseract is None:  # pragma: no cover
            raise OCRUnavailableError("pytesseract not installed")
        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        lang_str = tesseract_lang_string(langs or ["eng"])
        image = self._open_image(image_bytes)
        try:
            data = pytesseract.image_to_data(
                image, lang=lang_str, output_type=pytesseract.Output.DICT
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise OCRUnavailableError("tesseract binary not found") from exc
        except pytesseract.TesseractError as exc:
            raise OCRRuntimeError(f"tesseract failed for {lang_str}: {exc}") from exc
        lines, confidences = _lines_from_data(data)
        text = "\n".join(lines)
        confidence = sum(confidences) / len(confidences) / 100.0 if confidences else 0.0
        meta = {
            "backend": self.backend_name,
            "langs": lang_str,
            "words": len(confidences),
        }
        logger.debug("tesseract read %d lines with %s", len(lines), lang_str)
        return OCRResult(
            text=text,
            confidence=max(0.0, min(1.0, confidence)),
            meta=meta,
        )


__all__ = ["TesseractOCRRunner"]
