"""
pcxdec.pcx — PCX files on disk ↔ decoded images.

Thin wrappers around the in-memory decoder for callers that start from a
path and want either the raw RGBA result or a Pillow image.
"""
from __future__ import annotations

from pathlib import Path

from PIL import Image as PILImage

from .decoder import DecodedImage, decode_pcx
from .header import is_pcx_data


def load_pcx(path: str | Path) -> DecodedImage:
    """Read *path* and decode it to RGBA."""
    return decode_pcx(Path(path).read_bytes())


def read_pcx(path: str | Path) -> PILImage.Image:
    """Decode a PCX file to a PIL Image (RGBA)."""
    return load_pcx(path).to_image()


def is_pcx(path: str | Path) -> bool:
    """Return True if the file looks like a PCX file."""
    try:
        with open(path, "rb") as fp:
            return is_pcx_data(fp.read(1))
    except OSError:
        return False
