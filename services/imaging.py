from __future__ import annotations

import base64
import binascii
import io
import re
from dataclasses import dataclass
from typing import Optional, Union

from PIL import Image

_DATA_URL_RE = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)


@dataclass(frozen=True)
class SelectionRect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ViewportInfo:
    inner_width: float
    inner_height: float


def decode_image(data: Union[bytes, str]) -> bytes:
    """Return raw image bytes from bytes or a ``data:image/...;base64,`` URL."""
    if isinstance(data, bytes):
        return data
    match = _DATA_URL_RE.match(data)
    if not match:
        raise ValueError("expected a base64 image data URL")
    try:
        return base64.b64decode(data[match.end():], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 image payload: {exc}") from exc


def crop_image(
    image: Union[bytes, str],
    selection: SelectionRect,
    viewport: Optional[ViewportInfo] = None,
) -> bytes:
    """Cut ``selection`` (viewport coordinates) out of a full screenshot.

    The screenshot may be larger than the viewport (device pixel ratio), so
    coordinates are scaled by ``image size / viewport size``. Without a
    viewport the selection is in image pixels. Returns PNG.
    """
    if selection.width <= 0 or selection.height <= 0:
        raise ValueError("selection is empty")
    img = Image.open(io.BytesIO(decode_image(image)))
    if viewport is None:
        viewport = ViewportInfo(img.width, img.height)
    if viewport.inner_width <= 0 or viewport.inner_height <= 0:
        raise ValueError("viewport size must be positive")
    scale_x = img.width / viewport.inner_width
    scale_y = img.height / viewport.inner_height
    left = round(selection.x * scale_x)
    top = round(selection.y * scale_y)
    box = (
        left,
        top,
        left + max(1, round(selection.width * scale_x)),
        top + max(1, round(selection.height * scale_y)),
    )
    out = io.BytesIO()
    img.crop(box).save(out, format="PNG")
    return out.getvalue()


__all__ = ["SelectionRect", "ViewportInfo", "decode_image", "crop_image"]
