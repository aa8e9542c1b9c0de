"""Image output helpers: encode, save and export rendered identicons. No engine imports."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

# format name -> (Pillow format, media type, keeps alpha)
_FORMATS: dict[str, tuple[str, str, bool]] = {
    "png": ("PNG", "image/png", True),
    "webp": ("WEBP", "image/webp", True),
    "gif": ("GIF", "image/gif", True),
    "tiff": ("TIFF", "image/tiff", True),
    "bmp": ("BMP", "image/bmp", False),
    "jpeg": ("JPEG", "image/jpeg", False),
}
_ALIASES = {"jpg": "jpeg", "tif": "tiff"}

# Formats without an alpha channel are flattened onto white.
_FLATTEN_COLOR = (255, 255, 255)


def normalize_format(fmt: str) -> str:
    """Canonical lower-case format name. Raises ValueError if unsupported."""
    name = fmt.lower().lstrip(".")
    name = _ALIASES.get(name, name)
    if name not in _FORMATS:
        raise ValueError(f"Unsupported image format: {fmt!r} (expected one of {', '.join(_FORMATS)})")
    return name


def media_type_for(fmt: str) -> str:
    return _FORMATS[normalize_format(fmt)][1]


def _prepare(image: Image.Image, keeps_alpha: bool) -> Image.Image:
    if keeps_alpha or image.mode != "RGBA":
        return image
    flat = Image.new("RGB", image.size, _FLATTEN_COLOR)
    flat.paste(image, mask=image.getchannel("A"))
    return flat


def encode_image(image: Image.Image, fmt: str = "png") -> bytes:
    """Encode to an in-memory buffer in the given format."""
    pil_format, _, keeps_alpha = _FORMATS[normalize_format(fmt)]
    buf = io.BytesIO()
    _prepare(image, keeps_alpha).save(buf, format=pil_format)
    return buf.getvalue()


def save_image(image: Image.Image, path: str | Path, fmt: str | None = None) -> Path:
    """Write to ``path``; the format defaults to the file suffix."""
    path = Path(path)
    name = normalize_format(fmt or path.suffix or "png")
    pil_format, _, keeps_alpha = _FORMATS[name]
    path.parent.mkdir(parents=True, exist_ok=True)
    _prepare(image, keeps_alpha).save(path, format=pil_format)
    return path


def image_to_array(image: Image.Image) -> NDArray[np.uint8]:
    """(H, W, 4) uint8 RGBA pixel array."""
    return np.asarray(image.convert("RGBA"), dtype=np.uint8)
