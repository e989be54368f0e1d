from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import fitz  # type: ignore[import-not-found, import-untyped]

from core.settings import get_settings

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class PdfRenderError(RuntimeError):
    """Raised when a PDF page cannot be rendered."""


@dataclass
class PdfValidation:
    valid: bool
    error: Optional[str] = None
    num_pages: Optional[int] = None


def _looks_like_pdf(filename: Optional[str], content_type: Optional[str]) -> bool:
    if not content_type or content_type == PDF_CONTENT_TYPE:
        return True
    return bool(filename) and filename.lower().rsplit(".", 1)[-1] == "pdf"


def validate_pdf(
    data: bytes,
    *,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    max_size_mb: Optional[float] = None,
    max_pages: Optional[int] = None,
) -> PdfValidation:
    """Check size, type and page count of an uploaded PDF.

    Problems are reported in the returned ``PdfValidation``; nothing raises.
    """
    settings = get_settings()
    max_size_mb = settings.max_pdf_size_mb if max_size_mb is None else max_size_mb
    max_pages = settings.max_pdf_pages if max_pages is None else max_pages

    if len(data) > max_size_mb * 1024 * 1024:
        return PdfValidation(
            False, f"PDF file is too large. Maximum size: {max_size_mb:g}MB"
        )
    if not _looks_like_pdf(filename, content_type):
        return PdfValidation(False, "Unsupported file format. Only PDF is supported")

    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            num_pages = doc.page_count
    except Exception as exc:
        logger.warning("PDF validation failed: %s", exc)
        return PdfValidation(
            False, "Could not read the PDF file. It may be damaged or unsupported"
        )

    if num_pages > max_pages:
        return PdfValidation(
            False,
            f"PDF has more than {max_pages} page(s). Only the first page is supported",
            num_pages,
        )
    return PdfValidation(True, num_pages=num_pages)


def rasterize_pdf_page(
    data: bytes, page_number: int = 1, scale: Optional[float] = None
) -> bytes:
    """Render one page (1-based) to PNG bytes at ``scale`` times 72 dpi."""
    scale = get_settings().pdf_render_scale if scale is None else scale
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        raise PdfRenderError(f"cannot open PDF: {exc}") from exc
    with doc:
        if page_number < 1 or page_number > doc.page_count:
            raise PdfRenderError(
                f"page {page_number} does not exist; PDF has {doc.page_count} page(s)"
            )
        page = doc.load_page(page_number - 1)
        pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale))
        return pix.tobytes("png")


__all__ = ["PdfRenderError", "PdfValidation", "validate_pdf", "rasterize_pdf_page"]
