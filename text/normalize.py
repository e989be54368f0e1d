from __future__ import annotations

import re
import unicodedata

_CTRL_RE = re.compile(r"[\u0000-\u001F\u007F]")
_WS_RE = re.compile(r"\s+")


def collapse_whitespace(s: str) -> str:
    """Collapse runs of whitespace to single spaces and trim the ends."""
    return _WS_RE.sub(" ", s).strip()


def normalize_text(s: str) -> str:
    """Normalize OCR output before language identification.

    - Unicode NFC
    - drop control chars
    - replace soft hyphen and common ligatures
    - collapse whitespace
    """
    s = s.replace("\u00ad", "")  # soft hyphen
    s = s.replace("\ufb01", "fi").replace("\ufb02", "fl")  # ligatures
    s = unicodedata.normalize("NFC", s)
    s = _CTRL_RE.sub(" ", s)
    return collapse_whitespace(s)


__all__ = ["normalize_text", "collapse_whitespace"]
