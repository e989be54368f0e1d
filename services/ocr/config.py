"""Tesseract OCR configuration helpers."""

from __future__ import annotations

from typing import Iterable, List

DEFAULT_LANG = "eng"


def split_lang_string(value: str) -> List[str]:
    """Split a ``+``-joined hint such as ``"rus+eng"`` into codes."""
    return [part.strip() for part in value.split("+") if part.strip()]


def tesseract_lang_string(langs: Iterable[str]) -> str:
    """Join languages for Tesseract OCR.

    Keeps the caller's order and removes duplicates; entries may themselves
    be ``+``-joined.
    """
    ordered: List[str] = []
    for lang in langs:
        for code in split_lang_string(lang):
            if code not in ordered:
                ordered.append(code)
    return "+".join(ordered) if ordered else DEFAULT_LANG


__all__ = ["DEFAULT_LANG", "split_lang_string", "tesseract_lang_string"]
