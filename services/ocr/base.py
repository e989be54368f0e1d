from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from PIL import Image


class OCRError(RuntimeError):
    """Base OCR error."""


class OCRUnavailableError(OCRError):
    """Raised when a backend cannot be used (missing deps, binary, etc.)."""


class OCRRuntimeError(OCRError):
    """Raised when a backend fails after being selected."""


@dataclass
class OCRResult:
    text: str
    confidence: float = 0.0
    meta: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "confidence": self.confidence,
            "meta": self.meta,
        }


class OCRRunner(ABC):
    """Interface for OCR backends."""

    backend_name = "base"

    @abstractmethod
    def run(
        self,
        image_bytes: bytes,
        *,
        langs: Optional[Iterable[str]] = None,
        **opts: Any,
    ) -> OCRResult:
        raise NotImplementedError

    @staticmethod
    def _open_image(image_bytes: bytes) -> Image.Image:
        return Image.open(io.BytesIO(image_bytes)).convert("RGB")
