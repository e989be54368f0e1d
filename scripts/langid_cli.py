#!/usr/bin/env python3
"""Command line access to OCR language identification.

Images are read as-is; PDFs are validated and their first page is
rasterized before OCR.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer  # type: ignore[import-not-found]

from core.languages import UnsupportedLanguageError, list_supported_languages
from core.logging import configure_logging
from core.settings import get_settings
from observability.metrics import render_metrics
from services.imaging import SelectionRect, crop_image
from services.language_id import LanguageDetectionError, detect_language
from services.ocr.session import OCRSession
from services.pdf import rasterize_pdf_page, validate_pdf
from services.recognition import recognize

app = typer.Typer(help="Detect the language of text in images and PDFs")


def _lang_option():
    return typer.Option(
        None, "--lang", "-l", help="Candidate language code; repeat for several"
    )


def _crop_option():
    return typer.Option(
        None, "--crop", help="Only read the region x,y,width,height (pixels)"
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")
) -> None:
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_json)


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _load_image(path: Path) -> bytes:
    data = path.read_bytes()
    if path.suffix.lower() != ".pdf":
        return data
    settings = get_settings()
    check = validate_pdf(
        data,
        filename=path.name,
        max_size_mb=settings.max_pdf_size_mb,
        max_pages=settings.max_pdf_pages,
    )
    if not check.valid:
        typer.echo(check.error, err=True)
        raise typer.Exit(code=1)
    return rasterize_pdf_page(data, 1, settings.pdf_render_scale)


def _parse_crop(value: str) -> SelectionRect:
    try:
        x, y, width, height = (float(part) for part in value.split(","))
    except ValueError as exc:
        raise typer.BadParameter(
            "expected x,y,width,height", param_hint="--crop"
        ) from exc
    if width <= 0 or height <= 0:
        raise typer.BadParameter("crop region is empty", param_hint="--crop")
    return SelectionRect(x, y, width, height)


def _read_input(path: Path, crop: Optional[str]) -> bytes:
    image = _load_image(path)
    if crop:
        image = crop_image(image, _parse_crop(crop))
    return image


def _show_metrics(enabled: bool) -> None:
    if enabled:
        body, _ = render_metrics()
        typer.echo(body.decode("utf-8"), err=True)


@app.command()
def languages() -> None:
    """List supported language codes and labels."""
    _echo_json(list_supported_languages())


@app.command()
def detect(
    path: Path,
    lang: Optional[List[str]] = _lang_option(),
    crop: Optional[str] = _crop_option(),
    metrics: bool = typer.Option(False, "--metrics", help="Print metrics to stderr"),
) -> None:
    """Detect the language of the text in an image or PDF."""
    image = _read_input(path, crop)
    try:
        with OCRSession() as session:
            result = detect_language(image, lang, session.extract_text)
    except UnsupportedLanguageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except LanguageDetectionError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    _echo_json(result.as_dict())
    _show_metrics(metrics)


@app.command("recognize")
def recognize_cmd(
    path: Path,
    lang: Optional[List[str]] = _lang_option(),
    crop: Optional[str] = _crop_option(),
    override: Optional[str] = typer.Option(
        None, "--override", help="Skip detection and OCR with this language"
    ),
    metrics: bool = typer.Option(False, "--metrics", help="Print metrics to stderr"),
) -> None:
    """Detect the language, then OCR again with it and print the text."""
    image = _read_input(path, crop)
    try:
        with OCRSession() as session:
            result = recognize(image, session, candidates=lang, language=override)
    except UnsupportedLanguageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    _echo_json(result.as_dict())
    _show_metrics(metrics)


if __name__ == "__main__":
    app()
