from collections.abc import Generator
from io import BytesIO
from typing import Callable, List, Sequence, Tuple

import pytest
from PIL import Image, ImageDraw

from core import settings as settings_module
from core.correlation import set_request_id
from core.settings import Settings
from services.ocr.base import OCRResult


@pytest.fixture(autouse=True)
def _reset_state() -> Generator[None, None, None]:
    settings_module.get_settings.cache_clear()
    set_request_id(None)
    yield
    settings_module.get_settings.cache_clear()
    set_request_id(None)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


def sample_png(text: str = "hello") -> bytes:
    img = Image.new("RGB", (200, 60), "white")
    draw = ImageDraw.Draw(img)
    draw.text((10, 20), text, fill="black")
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class FakeExtractor:
    """Stands in for the OCR engine; records every language hint."""

    def __init__(self, text: str, confidence: float = 0.9) -> None:
        self.text = text
        self.confidence = confidence
        self.hints: List[str] = []

    def __call__(self, image: bytes, language_hint: str) -> OCRResult:
        self.hints.append(language_hint)
        return OCRResult(text=self.text, confidence=self.confidence)


def fixed_classifier(code: str) -> Callable[[str, Sequence[str], int], str]:
    calls: List[Tuple[str, Tuple[str, ...], int]] = []

    def classify(text: str, whitelist: Sequence[str], min_length: int) -> str:
        calls.append((text, tuple(whitelist), min_length))
        return code

    classify.calls = calls  # type: ignore[attr-defined]
    return classify
