import io
import json
import logging
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner  # type: ignore[import-not-found]

pytest.importorskip("fitz")

from scripts import langid_cli  # noqa: E402
from services.ocr.base import OCRResult  # noqa: E402
from tests.conftest import sample_png  # noqa: E402


class FakeSession:
    instances: list = []

    def __init__(self, *args, **kwargs) -> None:
        self.hints: list = []
        self.images: list = []
        FakeSession.instances.append(self)

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *exc_info) -> None:
        pass

    def extract_text(self, image: bytes, language_hint: str) -> OCRResult:
        self.hints.append(language_hint)
        self.images.append(image)
        return OCRResult(text="Привет мир", confidence=0.8)


@pytest.fixture
def cli(monkeypatch):
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    FakeSession.instances = []
    monkeypatch.setattr(langid_cli, "OCRSession", FakeSession)
    yield CliRunner()
    root.handlers = handlers
    root.setLevel(level)


def _png(tmp_path: Path) -> Path:
    path = tmp_path / "scan.png"
    path.write_bytes(sample_png())
    return path


def test_languages(cli) -> None:
    result = cli.invoke(langid_cli.app, ["languages"])
    assert result.exit_code == 0
    entries = json.loads(result.stdout)
    assert len(entries) == 20
    assert entries[0] == {"code": "eng", "label": "English"}


def test_detect(cli, tmp_path: Path) -> None:
    result = cli.invoke(
        langid_cli.app, ["detect", str(_png(tmp_path)), "--lang", "eng", "-l", "rus"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["language"] == "rus"
    assert payload["short_text"] is True
    assert FakeSession.instances[0].hints == ["eng+rus"]


def test_detect_unsupported_language(cli, tmp_path: Path) -> None:
    result = cli.invoke(langid_cli.app, ["detect", str(_png(tmp_path)), "-l", "xx"])
    assert result.exit_code == 2


def test_recognize_with_override(cli, tmp_path: Path) -> None:
    result = cli.invoke(
        langid_cli.app, ["recognize", str(_png(tmp_path)), "--override", "rus"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["language"] == "rus"
    assert payload["text"] == "Привет мир"
    assert payload["detected"] is None
    assert FakeSession.instances[0].hints == ["rus"]


def test_recognize_detects_first(cli, tmp_path: Path) -> None:
    result = cli.invoke(
        langid_cli.app, ["recognize", str(_png(tmp_path)), "-l", "eng", "-l", "rus"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["language"] == "rus"
    assert payload["uncertain"] is True
    assert FakeSession.instances[0].hints == ["eng+rus", "rus"]


def test_broken_pdf_is_rejected(cli, tmp_path: Path) -> None:
    path = tmp_path / "scan.pdf"
    path.write_bytes(b"not a pdf at all")
    result = cli.invoke(langid_cli.app, ["detect", str(path)])
    assert result.exit_code == 1
    assert FakeSession.instances == []


def test_detect_reads_only_the_cropped_region(cli, tmp_path: Path) -> None:
    result = cli.invoke(
        langid_cli.app, ["detect", str(_png(tmp_path)), "--crop", "10,5,50,30"]
    )
    assert result.exit_code == 0, result.output
    image = FakeSession.instances[0].images[0]
    assert Image.open(io.BytesIO(image)).size == (50, 30)


@pytest.mark.parametrize("crop", ["10,5,50", "a,b,c,d", "0,0,0,10"])
def test_bad_crop_is_a_usage_error(cli, tmp_path: Path, crop: str) -> None:
    result = cli.invoke(langid_cli.app, ["detect", str(_png(tmp_path)), "--crop", crop])
    assert result.exit_code == 2
    assert FakeSession.instances == []
