"""
pcxdec.errors — exceptions raised while decoding a PCX buffer.

All of them derive from DecodeError, which is itself a ValueError, so code
that already catches ValueError around an image reader keeps working.
"""
from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every PCX parse/decode failure."""


class InvalidMagic(DecodeError):
    """First byte is not the ZSoft manufacturer marker (10)."""


class InvalidDimensions(DecodeError):
    """Bounding box or scanline length describes an empty or inconsistent image."""


class UnsupportedFormat(DecodeError):
    """Bits-per-pixel / plane-count combination this decoder does not handle."""

    def __init__(self, bits_per_pixel: int, planes: int | None = None) -> None:
        self.bits_per_pixel = bits_per_pixel
        self.planes = planes
        if planes is None:
            msg = f"unsupported bits per pixel: {bits_per_pixel}"
        else:
            msg = f"unsupported format: {bits_per_pixel} bpp x {planes} plane(s)"
        super().__init__(msg)


class MissingPalette(DecodeError):
    """8-bit indexed image without the trailing 256-colour palette."""


class TruncatedStream(DecodeError):
    """Input ends before the header or the pixel data has been fully read."""
